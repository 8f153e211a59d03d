import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "usuario no encontrado"


class TalkusError(Exception):
    """Base class for application errors"""


class MissingParameterError(TalkusError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"falta el parámetro '{name}'")


class RepositoryError(TalkusError):
    """Raised by repositories when the underlying store fails"""


class UserLookupError(TalkusError):
    """
    A user could not be returned.

    Every subclass carries the same fixed message, whatever happened in the
    store. The subclass tells a missing user apart from an unreachable store.
    """

    def __init__(self, message: str = USER_NOT_FOUND_MESSAGE):
        super().__init__(message)


class UserNotFoundError(UserLookupError):
    pass


class UserUnavailableError(UserLookupError):
    pass


class ImageUploadError(TalkusError):
    """Raised when the image host rejects or fails an upload"""


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as {"error": <detail>}"""
    if exc.status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.detail}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )
