from typing import List

from talkus.modules.posts.models.post import Post
from talkus.modules.posts.repositories.post import PostRepository

class PostService:
    def __init__(self, repository: PostRepository):
        self.repository = repository

    def get_all_posts(self) -> List[Post]:
        return self.repository.get_all()

    def create_post(self, post: Post) -> Post:
        """Persist `post` and return it populated. RepositoryError propagates."""
        self.repository.create(post)
        return post
