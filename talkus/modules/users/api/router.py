from typing import Any, Dict
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from talkus.core.errors import MissingParameterError, UserNotFoundError, UserUnavailableError
from talkus.deps import get_user_service
from talkus.modules.users.schemas.user import to_record
from talkus.modules.users.services.user import UserService

router = APIRouter()
logger = logging.getLogger("talkus")

@router.get("", response_model=Dict[str, Any])
def read_user(
    user_id: str = Query("", alias="id"),
    user_service: UserService = Depends(get_user_service),
) -> Any:
    """Get a user profile by ID"""
    try:
        user = user_service.get_user(user_id)
    except MissingParameterError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except UserUnavailableError as e:
        logger.error(f"User store unavailable while reading {user_id}: {e.__cause__}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )

    return to_record(user)
