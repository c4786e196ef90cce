"""Repository interfaces for abstracting data persistence in the domain layer.

These abstract base classes are the "ports" the authentication service talks
to. Concrete adapters live in `gatekeeper.infrastructure.repositories`: an
in-memory pair for tests and a SQL pair for production.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from gatekeeper.domain.entities.token import Token, TokenType
from gatekeeper.domain.entities.user import User


class IUserDirectory(ABC):
    """Contract for looking up and persisting `User` aggregates."""

    @abstractmethod
    async def find_one(self, identifier: str) -> Optional[User]:
        """Retrieves a user by email (case-insensitively) or by username.

        The token relation is not hydrated: the returned user starts with an
        empty token collection.

        Args:
            identifier: Email address or username.

        Returns:
            The matching `User`, or `None`.
        """
        raise NotImplementedError

    @abstractmethod
    async def exists(self, email: str) -> bool:
        """Checks whether a user with this email (case-insensitively) exists."""
        raise NotImplementedError

    @abstractmethod
    async def create(self, user: User) -> None:
        """Persists a new user.

        Raises:
            DatabaseError: If the user cannot be stored (e.g. duplicate email).
        """
        raise NotImplementedError

    @abstractmethod
    async def save(self, user: User) -> None:
        """Persists changes to an existing user, including tokens appended to it."""
        raise NotImplementedError


class ITokenStore(ABC):
    """Contract for single-use token persistence."""

    @abstractmethod
    async def find_by_type_and_owner_and_used(
        self, token_type: TokenType, user_id: str, used: bool
    ) -> List[Token]:
        """Returns the user's tokens of the given type and used-state, oldest first."""
        raise NotImplementedError

    @abstractmethod
    async def remove(self, token_id: str) -> None:
        """Deletes a token by identifier. Removing an unknown id is a no-op."""
        raise NotImplementedError

    @abstractmethod
    async def save_single(self, token: Token) -> None:
        """Inserts or updates a single token."""
        raise NotImplementedError
