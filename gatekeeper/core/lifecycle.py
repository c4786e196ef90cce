"""Application lifecycle management."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from gatekeeper.core.config.settings import settings
from gatekeeper.core.logging import logger
from gatekeeper.infrastructure.database.async_db import create_db_and_tables, get_engine


def create_lifespan_manager():
    """Create the application lifespan manager.

    Returns:
        AsyncContextManager: The lifespan manager for the FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.CREATE_TABLES_ON_STARTUP:
            await create_db_and_tables()
        logger.info("application_startup", env=settings.APP_ENV, version=settings.VERSION)

        yield

        await get_engine().dispose()
        logger.info("application_shutdown", env=settings.APP_ENV)

    return lifespan
