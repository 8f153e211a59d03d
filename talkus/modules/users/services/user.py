import logging

from talkus.core.errors import (
    MissingParameterError,
    UserNotFoundError,
    UserUnavailableError,
)
from talkus.modules.users.models.user import User
from talkus.modules.users.repositories.user import UserRepository

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, repository: UserRepository):
        self.repository = repository

    def get_user(self, user_id: str) -> User:
        """
        Get a user by ID.

        An empty ID fails with MissingParameterError before the repository
        is consulted. Store failures and missing users both surface with the
        fixed "usuario no encontrado" message; the exception type tells them
        apart.
        """
        if not user_id:
            raise MissingParameterError("id")

        try:
            user = self.repository.get_user_by_id(user_id)
        except Exception as e:
            logger.error(f"User lookup for {user_id} failed: {e}")
            raise UserUnavailableError() from e

        if user is None:
            raise UserNotFoundError()
        return user
