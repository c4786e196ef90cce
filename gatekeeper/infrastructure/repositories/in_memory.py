"""In-memory user directory and token store.

Used by the test-suite and for local experiments. Both store and return
copies of entities, like the SQL adapters do.
"""

from dataclasses import replace
from typing import Dict, List, Optional

from structlog import get_logger

from gatekeeper.core.exceptions import DatabaseError
from gatekeeper.domain.entities.token import Token, TokenType
from gatekeeper.domain.entities.user import User
from gatekeeper.domain.interfaces.repositories import ITokenStore, IUserDirectory

logger = get_logger(__name__)


class InMemoryUserDirectory(IUserDirectory):
    """Dictionary-backed `IUserDirectory`.

    Like the ``tokens`` table behind the SQL adapters, the token store passed
    in holds the user-to-token relation: saving a user upserts its appended
    tokens there, and `owned_tokens` reads them back.
    """

    def __init__(self, token_store: Optional["InMemoryTokenStore"] = None):
        self._users: Dict[str, User] = {}
        self._token_store = token_store if token_store is not None else InMemoryTokenStore()

    async def find_one(self, identifier: str) -> Optional[User]:
        identifier = identifier.strip()
        for user in self._users.values():
            if user.email.value == identifier.lower() or user.username.value == identifier:
                return replace(user, tokens=[])
        return None

    async def exists(self, email: str) -> bool:
        email = email.strip().lower()
        return any(user.email.value == email for user in self._users.values())

    async def create(self, user: User) -> None:
        if user.id in self._users or await self.exists(user.email.value):
            raise DatabaseError("User already exists", code="user_already_exists")
        self._users[user.id] = replace(user, tokens=[])
        for token in user.tokens:
            await self._token_store.save_single(token)
        logger.debug("User created in memory", user_id=user.id)

    async def save(self, user: User) -> None:
        if user.id not in self._users:
            raise DatabaseError("User does not exist", code="user_not_found")
        self._users[user.id] = replace(user, tokens=[])
        for token in user.tokens:
            await self._token_store.save_single(token)

    def owned_tokens(self, user_id: str) -> List[Token]:
        """Tokens currently stored for a user, oldest first."""
        owned = [token for token in self._token_store.all() if token.user_id == user_id]
        return sorted(owned, key=lambda token: token.created_at)


class InMemoryTokenStore(ITokenStore):
    """Dictionary-backed `ITokenStore` keyed by token id."""

    def __init__(self):
        self._tokens: Dict[str, Token] = {}

    async def find_by_type_and_owner_and_used(
        self, token_type: TokenType, user_id: str, used: bool
    ) -> List[Token]:
        matches = [
            replace(token)
            for token in self._tokens.values()
            if token.type == token_type and token.user_id == user_id and token.used == used
        ]
        return sorted(matches, key=lambda token: token.created_at)

    async def remove(self, token_id: str) -> None:
        self._tokens.pop(token_id, None)

    async def save_single(self, token: Token) -> None:
        self._tokens[token.id] = replace(token)

    def all(self) -> List[Token]:
        """Snapshot of every stored token."""
        return [replace(token) for token in self._tokens.values()]
