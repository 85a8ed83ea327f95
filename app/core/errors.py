"""Application error taxonomy and the FastAPI handlers that render it as JSON."""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Server error"


class AppError(Exception):
    """Base class for errors that map onto an HTTP status and an `{"error": ...}` body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = GENERIC_SERVER_ERROR

    def __init__(self, message: str | None = None, details: Any = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class InvalidRequestError(AppError):
    """Missing or malformed request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class DuplicateEmailError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already registered"


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid credentials"


class MalformedIdentityError(AppError):
    """Token was valid but its subject is not a well-formed user id."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid user ID format"


class AuthenticationError(AppError):
    """Base for all 401 responses; rendered with a WWW-Authenticate challenge."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Unauthorized"


class UnauthenticatedError(AuthenticationError):
    default_message = "Unauthorized - No token provided"


class InvalidTokenError(AuthenticationError):
    default_message = "Unauthorized - Invalid token"


class ExpiredTokenError(AuthenticationError):
    default_message = "Unauthorized - Token expired"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class UpstreamError(AppError):
    """An external service failed; `details` carries its error message."""

    default_message = "Upstream service error"


class ServerError(AppError):
    """Storage-layer failure. Never carries details."""


class ConfigurationError(AppError):
    """Required process configuration (e.g. JWT_SECRET) is missing.

    The message is logged, but the client only ever sees the generic server error.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


def error_body(message: str, details: Any = None) -> dict[str, Any]:
    """Build the JSON error body shared by every handler."""
    body: dict[str, Any] = {"error": message}
    if details is not None:
        body["details"] = details
    return body


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ConfigurationError):
        logger.error(
            "Configuration error",
            extra={"path": request.url.path, "reason": exc.message},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(GENERIC_SERVER_ERROR),
        )
    headers = None
    if isinstance(exc, AuthenticationError):
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.message, exc.details),
        headers=headers,
    )


def _format_validation_errors(exc: RequestValidationError) -> list[str]:
    """Flatten pydantic errors to 'field: message' strings (no input echo)."""
    formatted: list[str] = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "form")]
        field = ".".join(loc) or "request"
        formatted.append(f"{field}: {err.get('msg', 'invalid value')}")
    return formatted


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("Invalid request", _format_validation_errors(exc)),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error",
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(GENERIC_SERVER_ERROR),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
