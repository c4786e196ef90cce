import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from gatekeeper.infrastructure.database.async_db import create_db_and_tables
from gatekeeper.infrastructure.repositories import SQLTokenStore, SQLUserDirectory


@pytest_asyncio.fixture
async def session_factory(tmp_path):
    """Session factory over a throwaway SQLite database file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'gatekeeper.db'}")
    await create_db_and_tables(engine)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def sql_user_directory(session_factory):
    return SQLUserDirectory(session_factory)


@pytest_asyncio.fixture
async def sql_token_store(session_factory):
    return SQLTokenStore(session_factory)
