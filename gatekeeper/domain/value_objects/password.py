"""Hashed password value object.

The plaintext password only ever exists inside a single authentication
attempt (see `Credential`); what a `User` holds is the bcrypt hash.
"""

from dataclasses import dataclass
from typing import ClassVar

from structlog import get_logger

from gatekeeper.utils.security import hash_password, verify_password

logger = get_logger(__name__)


@dataclass(frozen=True)
class HashedPassword:
    """Bcrypt-hashed password value object.

    Attributes:
        value: The bcrypt hash string (immutable)
    """

    value: str

    PREFIXES: ClassVar[tuple] = ("$2a$", "$2b$", "$2y$")
    HASH_LENGTH: ClassVar[int] = 60

    def __post_init__(self) -> None:
        """Validate hashed password format."""
        if not self.value:
            raise ValueError("Hashed password cannot be empty")
        if not self.value.startswith(self.PREFIXES):
            raise ValueError("Invalid hashed password format")
        if len(self.value) != self.HASH_LENGTH:
            raise ValueError("Invalid hashed password length")

    @classmethod
    def from_plain_password(cls, plain_password: str) -> "HashedPassword":
        """Hash a plaintext password.

        Raises:
            ValueError: If the password is empty.
        """
        if not plain_password:
            raise ValueError("Password cannot be empty")
        return cls(value=hash_password(plain_password))

    def verify(self, plain_password: str) -> bool:
        """Verify a plaintext password against this hash in constant time.

        Returns False for any verification error so a corrupt hash cannot be
        told apart from a wrong password.
        """
        try:
            return verify_password(plain_password, self.value)
        except (ValueError, TypeError) as e:
            logger.warning("Password verification error", error_type=type(e).__name__)
            return False

    def __repr__(self) -> str:
        return "HashedPassword(value='***')"
