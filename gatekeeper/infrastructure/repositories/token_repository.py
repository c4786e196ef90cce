"""Token store implementation using SQLAlchemy async sessions.

Every call opens its own session, which lets the authentication service
remove several stale tokens concurrently.
"""

from typing import List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import async_sessionmaker
from structlog import get_logger

from gatekeeper.core.exceptions import DatabaseError
from gatekeeper.domain.entities.token import Token, TokenType
from gatekeeper.domain.interfaces.repositories import ITokenStore
from gatekeeper.infrastructure.database.models import TokenRecord
from gatekeeper.infrastructure.repositories.mappers import record_to_token, token_to_record

logger = get_logger(__name__)


class SQLTokenStore(ITokenStore):
    """SQLAlchemy implementation of `ITokenStore` over the ``tokens`` table."""

    def __init__(self, session_factory: async_sessionmaker):
        self._session_factory = session_factory

    async def find_by_type_and_owner_and_used(
        self, token_type: TokenType, user_id: str, used: bool
    ) -> List[Token]:
        statement = (
            select(TokenRecord)
            .where(
                TokenRecord.type == TokenType(token_type).value,
                TokenRecord.user_id == user_id,
                TokenRecord.used == used,
            )
            .order_by(TokenRecord.created_at)
        )
        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                records = result.scalars().all()
        except SQLAlchemyError as e:
            logger.error("Error retrieving tokens", user_id=user_id, error=str(e))
            raise DatabaseError("Failed to look up tokens") from e
        return [record_to_token(record) for record in records]

    async def remove(self, token_id: str) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.execute(delete(TokenRecord).where(TokenRecord.id == token_id))
        except SQLAlchemyError as e:
            logger.warning("Error removing token", token_id=token_id, error=str(e))
            raise DatabaseError("Failed to remove token") from e
        logger.debug("Token removed", token_id=token_id)

    async def save_single(self, token: Token) -> None:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    await session.merge(token_to_record(token))
        except SQLAlchemyError as e:
            logger.error("Error saving token", token_id=token.id, error=str(e))
            raise DatabaseError("Failed to save token") from e
        logger.debug("Token saved", token_id=token.id, token_type=token.type.value)
