from typing import Optional
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from talkus.core.errors import RepositoryError
from talkus.modules.users.models.user import User

logger = logging.getLogger(__name__)

class UserRepository:
    """Data access for users"""

    def __init__(self, db: Session):
        self.db = db

    def get_user_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID, None when there is no such user"""
        try:
            return self.db.query(User).filter(User.id == user_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Error getting user {user_id}: {e}")
            raise RepositoryError("could not read user") from e
