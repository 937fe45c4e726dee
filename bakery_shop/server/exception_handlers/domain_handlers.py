"""
Domain Exception Handlers.

Translate the errors raised by the service layer into JSON responses:

- EntityNotFoundError -> 404
- UserFriendlyDataError -> 409, with the message shown to the user as-is
- AccessDeniedError -> 403
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from bakery_shop.core.errors import AccessDeniedError, EntityNotFoundError, UserFriendlyDataError
from bakery_shop.core.logging_config import get_logger

logger = get_logger(__name__)


async def entity_not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    logger.debug(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def user_friendly_data_error_handler(request: Request, exc: UserFriendlyDataError) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


async def access_denied_handler(request: Request, exc: AccessDeniedError) -> JSONResponse:
    logger.warning(f"Access denied for {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)})
