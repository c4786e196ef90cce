"""Single-use token entity."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class TokenType(str, Enum):
    """Kinds of single-use tokens a user can own.

    Attributes:
        ACTIVATION: Proves the right to verify ownership of the account's email.
    """

    ACTIVATION = "activation"


@dataclass
class Token:
    """A single-use artifact owned by exactly one user.

    Tokens are created unused and are never switched back to unused once
    consumed. A token superseded by a newer one of the same type is removed
    from the store rather than mutated.

    Attributes:
        id: Unique identifier, also the value sent in activation links.
        type: The token kind.
        user_id: Identifier of the owning user.
        used: Whether the token has been consumed.
        created_at: UTC creation timestamp.
    """

    id: str
    type: TokenType
    user_id: str
    used: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, type: TokenType, user_id: str, used: bool = False) -> "Token":
        """Create a new token with a fresh random identifier."""
        return cls(id=str(uuid.uuid4()), type=TokenType(type), user_id=user_id, used=used)

    def mark_used(self) -> None:
        """Consume the token. Consumption cannot be undone."""
        self.used = True
