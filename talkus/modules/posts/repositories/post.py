from typing import List
import uuid
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from talkus.core.errors import RepositoryError
from talkus.modules.posts.models.post import Post

logger = logging.getLogger(__name__)

class PostRepository:
    """Data access for posts"""

    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> List[Post]:
        """Get all posts, newest first"""
        logger.info("Getting all posts")
        try:
            return self.db.query(Post).order_by(Post.created_at.desc()).all()
        except SQLAlchemyError as e:
            logger.error(f"Error listing posts: {e}")
            raise RepositoryError("could not list posts") from e

    def create(self, post: Post) -> None:
        """
        Persist a new post. The passed entity is updated in place with its
        generated id and the stored values.
        """
        if not post.id:
            post.id = str(uuid.uuid4())
        logger.info(f"Creating post with ID: {post.id}")
        try:
            self.db.add(post)
            self.db.commit()
            self.db.refresh(post)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating post {post.id}: {e}")
            raise RepositoryError("could not create post") from e
