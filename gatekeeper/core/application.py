"""Application factory for creating and configuring the FastAPI application."""

from fastapi import FastAPI

from gatekeeper.adapters.api.v1 import api_router
from gatekeeper.core.config.settings import settings
from gatekeeper.core.handlers import register_exception_handlers
from gatekeeper.core.lifecycle import create_lifespan_manager
from gatekeeper.core.logging import configure_logging


def create_application() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: The configured FastAPI application instance
    """
    configure_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Credential verification and session issuance with an email-verification gate.",
        lifespan=create_lifespan_manager(),
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix="/api/v1")

    return app
