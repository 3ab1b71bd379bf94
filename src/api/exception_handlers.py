"""Exception handlers converting errors into ``{"error": ...}`` JSON responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.api.models import ErrorResponse
from src.reminders.exceptions import ReminderError

logger = logging.getLogger(__name__)


def _error_response(
    status_code: int,
    message: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
        headers=headers,
    )


async def reminder_error_handler(request: Request, exc: ReminderError) -> JSONResponse:
    """Answer a reminder error with its status and caller-safe message.

    Server-side failures are logged with their cause; the caller only sees
    the generic message.
    """
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}", exc_info=exc)
    else:
        logger.warning(f"{request.method} {request.url.path} rejected: {exc.message}")
    return _error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Answer an HTTPException with its detail under ``error``."""
    return _error_response(exc.status_code, str(exc.detail), exc.headers)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Answer a malformed request body with 400."""
    logger.warning(f"{request.method} {request.url.path} invalid request: {exc.errors()}")
    return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer any other error with a generic 500."""
    logger.error(f"{request.method} {request.url.path} unhandled error: {exc}", exc_info=exc)
    return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(application: FastAPI) -> None:
    """Install the JSON error handlers on an application.

    :param application: The FastAPI application.
    """
    application.add_exception_handler(ReminderError, reminder_error_handler)
    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)
