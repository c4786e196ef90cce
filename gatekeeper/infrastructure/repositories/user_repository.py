"""User directory implementation using SQLAlchemy async sessions.

Each operation runs in its own short-lived session taken from the injected
session factory, so the directory is safe to share between concurrent
coroutines.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from structlog import get_logger

from gatekeeper.core.exceptions import DatabaseError
from gatekeeper.domain.entities.user import User
from gatekeeper.domain.interfaces.repositories import IUserDirectory
from gatekeeper.domain.value_objects.email import mask_email
from gatekeeper.infrastructure.database.models import UserRecord
from gatekeeper.infrastructure.repositories.mappers import (
    record_to_user,
    token_to_record,
    user_to_record,
)

logger = get_logger(__name__)


class SQLUserDirectory(IUserDirectory):
    """SQLAlchemy implementation of `IUserDirectory` over the ``users`` table."""

    def __init__(self, session_factory: async_sessionmaker):
        """Initialize the directory.

        Args:
            session_factory: Factory producing `AsyncSession` objects.
        """
        self._session_factory = session_factory

    async def find_one(self, identifier: str) -> Optional[User]:
        """Find a user by case-insensitive email or exact username."""
        identifier = identifier.strip()
        if not identifier:
            return None

        statement = select(UserRecord).where(
            or_(
                func.lower(UserRecord.email) == identifier.lower(),
                UserRecord.username == identifier,
            )
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                record = result.scalars().first()
        except SQLAlchemyError as e:
            logger.error(
                "Error retrieving user",
                identifier=mask_email(identifier),
                error=str(e),
                error_type=type(e).__name__,
                operation="find_one",
            )
            raise DatabaseError("Failed to look up user") from e

        logger.debug("User lookup completed", identifier=mask_email(identifier), found=record is not None)
        return record_to_user(record) if record is not None else None

    async def exists(self, email: str) -> bool:
        statement = (
            select(func.count())
            .select_from(UserRecord)
            .where(func.lower(UserRecord.email) == email.strip().lower())
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                return result.scalar_one() > 0
        except SQLAlchemyError as e:
            logger.error("Error checking user existence", error=str(e), operation="exists")
            raise DatabaseError("Failed to check user existence") from e

    async def create(self, user: User) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    session.add(user_to_record(user))
                    # Tokens reference the user row, which must be inserted first
                    await session.flush()
                    for token in user.tokens:
                        session.add(token_to_record(token))
        except IntegrityError as e:
            logger.warning("User already exists", email=user.email.mask_for_logging())
            raise DatabaseError("User already exists", code="user_already_exists") from e
        except SQLAlchemyError as e:
            logger.error("Error creating user", user_id=user.id, error=str(e), operation="create")
            raise DatabaseError("Failed to create user") from e

        logger.info("User created", user_id=user.id, email=user.email.mask_for_logging())

    async def save(self, user: User) -> None:
        """Update the user row and upsert every token in its collection.

        Raises:
            DatabaseError: If the user does not exist or the write fails.
        """
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    record = await session.get(UserRecord, user.id)
                    if record is None:
                        raise DatabaseError("User does not exist", code="user_not_found")
                    record.email = user.email.value
                    record.username = user.username.value
                    record.password_hash = user.password.value
                    record.is_verified = user.is_verified
                    record.updated_at = datetime.now(timezone.utc)
                    for token in user.tokens:
                        await session.merge(token_to_record(token))
        except SQLAlchemyError as e:
            logger.error("Error saving user", user_id=user.id, error=str(e), operation="save")
            raise DatabaseError("Failed to save user") from e

        logger.debug("User saved", user_id=user.id, token_count=len(user.tokens))
