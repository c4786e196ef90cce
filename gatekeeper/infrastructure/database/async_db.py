"""
Asynchronous Database Utilities Module

The engine is created lazily from ``DATABASE_URL`` on first use, so importing
the application never requires the database driver to be reachable.

Key Components:
    - get_engine: The cached asynchronous SQLAlchemy engine.
    - get_session_factory: The cached session factory bound to that engine.
    - create_db_and_tables: Creates missing tables using the async engine.
"""

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel
from structlog import get_logger

from gatekeeper.core.config.settings import settings
from gatekeeper.infrastructure.database import models  # noqa: F401  (registers tables)

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Return the process-wide async engine."""
    engine = create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        pool_pre_ping=settings.DATABASE_POOL_PRE_PING,
    )
    logger.info("Async database engine created", driver=engine.url.drivername)
    return engine


@lru_cache(maxsize=1)
def get_session_factory() -> async_sessionmaker:
    return async_sessionmaker(bind=get_engine(), class_=AsyncSession, expire_on_commit=False)


async def create_db_and_tables(engine: AsyncEngine = None) -> None:
    """Create all registered tables that do not exist yet."""
    engine = engine or get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ensured", tables=sorted(SQLModel.metadata.tables))
