"""
Global exception handlers for the FastAPI application.

Authentication rejections never reach these handlers; they are returned by
the login route. What arrives here are infrastructure failures, which are
translated into JSON error responses instead of bare 500 pages.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status
from structlog import get_logger

from gatekeeper.core.exceptions import (
    DatabaseError,
    EmailServiceError,
    GatekeeperError,
)

__all__ = [
    "database_error_handler",
    "email_service_error_handler",
    "gatekeeper_error_handler",
    "unhandled_exception_handler",
    "register_exception_handlers",
]

logger = get_logger(__name__)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    """Handles `DatabaseError`, returning a `503 Service Unavailable`."""
    logger.error("Database failure", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Service temporarily unavailable"},
    )


async def email_service_error_handler(request: Request, exc: EmailServiceError) -> JSONResponse:
    """Handles `EmailServiceError`, returning a `502 Bad Gateway`."""
    logger.error("Email delivery failure", error=exc.code, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": "Email could not be sent"},
    )


async def gatekeeper_error_handler(request: Request, exc: GatekeeperError) -> JSONResponse:
    """Fallback for every other `GatekeeperError`."""
    logger.error("Application error", error=exc.code, message=exc.message, path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled exception", path=request.url.path, error_type=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI application."""
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(EmailServiceError, email_service_error_handler)
    app.add_exception_handler(GatekeeperError, gatekeeper_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
