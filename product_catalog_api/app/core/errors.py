"""
Typed application errors and the central error‑response stage.

Validators, the API key guard and the service layer signal failures by
raising one of the ``AppError`` subclasses below.  Handlers never catch
them; ``register_exception_handlers`` installs the only code that turns
a failure into an HTTP response.  Every error body has the same shape::

    {"message": "<human readable text>"}

Failures that are not ``AppError`` instances are handled by
``unexpected_error_response``, which the HTTP middleware in ``main``
calls after logging the traceback.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .logging_config import ERROR_LOGGER


class AppError(Exception):
    """Base class for failures that map onto an HTTP status code."""

    default_message = "Internal Server Error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = None, status_code: int = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ValidationError(AppError):
    """Malformed, missing or mistyped request body fields."""

    default_message = "Validation failed"
    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(AppError):
    """Missing or wrong API key on a protected route."""

    default_message = "Unauthorized"
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(AppError):
    """The referenced resource does not exist."""

    default_message = "Resource not found"
    status_code = status.HTTP_404_NOT_FOUND


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def unexpected_error_response(exc: Exception) -> JSONResponse:
    """Log an unrecognised failure and wrap it as a 500 response.

    A ``status_code`` attribute on the exception is honoured when it is
    an integer, otherwise 500 is used.
    """
    logging.getLogger(ERROR_LOGGER).error("Unexpected error: %s", exc, exc_info=exc)
    status_code = getattr(exc, "status_code", None)
    if not isinstance(status_code, int):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    return error_response(str(exc) or AppError.default_message, status_code)


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown routes (404) and unsupported methods (405) raised by routing.
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"{location}: {first.get('msg', 'invalid value')}" if location else first.get("msg")
    else:
        message = ValidationError.default_message
    return error_response(message, status.HTTP_400_BAD_REQUEST)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on ``app``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
