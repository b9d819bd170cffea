"""Error responses.

Every error leaving the API is a JSON object of the form {"error": "<message>"}.
Domain errors map to 4xx codes; anything unexpected is logged and returned as
a generic 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.model.errors import (
    DomainError,
    DuplicateError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

_DOMAIN_STATUS_CODES: dict[type[DomainError], int] = {
    UnauthorizedError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ValidationError: status.HTTP_400_BAD_REQUEST,
    # Taken emails are reported as a client error, whether caught by the
    # pre-check or by the store's unique constraint
    DuplicateError: status.HTTP_400_BAD_REQUEST,
}


def error_response(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def status_code_for(exc: DomainError) -> int:
    """Return the HTTP status for a domain error, 500 for unmapped ones."""
    for error_type in type(exc).__mro__:
        if error_type in _DOMAIN_STATUS_CODES:
            return _DOMAIN_STATUS_CODES[error_type]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    status_code = status_code_for(exc)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            "Unexpected domain error",
            exc_info=exc,
            extra={"path": request.url.path, "method": request.method},
        )
        return error_response(status_code, INTERNAL_ERROR_MESSAGE)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return error_response(status_code, exc.message, headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Request validation failed", extra={"path": request.url.path, "errors": str(exc.errors())[:500]})
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
