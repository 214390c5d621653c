"""
Todo Auth API - Error Taxonomy

Domain exceptions raised by the stores and services, and the handlers that
translate them into JSON error responses at the API boundary.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Request failed"
    headers: dict[str, str] | None = None

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Missing required fields"


class AuthFailure(AppError):
    """Login credentials did not verify. The message never says which part was wrong."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid username or password"
    headers = {"WWW-Authenticate": "Bearer"}


class UsernameTakenError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Username already exists"


class AuthError(AppError):
    """Bearer token problems on protected routes."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Could not validate credentials"


class MissingTokenError(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Token required"
    headers = {"WWW-Authenticate": "Bearer"}


class InvalidTokenError(AuthError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class TokenExpiredError(InvalidTokenError):
    default_message = "Token expired"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed or incomplete request bodies as 400 instead of FastAPI's 422."""
    fields = [".".join(str(part) for part in err.get("loc", ()) if part != "body") for err in exc.errors()]
    fields = [field for field in fields if field]
    logger.info(f"Rejected request to {request.url.path}: invalid fields {fields}")
    message = ValidationError.default_message
    if fields:
        message = f"{message}: {', '.join(fields)}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
