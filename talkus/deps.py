from fastapi import Depends
from sqlalchemy.orm import Session

from talkus.db.session import get_db
from talkus.modules.posts.repositories.post import PostRepository
from talkus.modules.posts.services.post import PostService
from talkus.modules.users.repositories.user import UserRepository
from talkus.modules.users.services.user import UserService

def get_post_service(db: Session = Depends(get_db)) -> PostService:
    """
    Dependency wiring the post use case to a request-scoped session
    """
    return PostService(PostRepository(db))

def get_user_service(db: Session = Depends(get_db)) -> UserService:
    """
    Dependency wiring the user use case to a request-scoped session
    """
    return UserService(UserRepository(db))
