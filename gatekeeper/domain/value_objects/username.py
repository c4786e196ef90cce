"""Username value object for domain modeling.

Usernames are shown to the account owner (e.g. in the activation email) and
may also be used as a lookup identifier, so they are validated on
construction and compared case-insensitively.
"""

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Username:
    """Immutable, validated username.

    Enforces username format requirements:
    - 3-30 characters in length
    - Alphanumeric characters, underscores, hyphens and dots only
    - Cannot start or end with a special character
    - Surrounding whitespace is stripped
    """

    value: str

    MIN_LENGTH: ClassVar[int] = 3
    MAX_LENGTH: ClassVar[int] = 30
    PATTERN: ClassVar[re.Pattern] = re.compile(r"^[A-Za-z0-9](?:[A-Za-z0-9._-]*[A-Za-z0-9])?$")

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("Username cannot be empty")

        value = self.value.strip()
        object.__setattr__(self, "value", value)

        if not (self.MIN_LENGTH <= len(value) <= self.MAX_LENGTH):
            raise ValueError(
                f"Username must be between {self.MIN_LENGTH} and {self.MAX_LENGTH} characters"
            )
        if not self.PATTERN.match(value):
            raise ValueError(
                "Username may only contain letters, digits, '.', '_' and '-', "
                "and must start and end with a letter or digit"
            )

    def mask_for_logging(self) -> str:
        """Return masked username for safe logging (first 2 chars + asterisks)."""
        return self.value[:2] + "*" * (len(self.value) - 2)

    def __str__(self) -> str:
        return self.value

    def __eq__(self, other) -> bool:
        if isinstance(other, Username):
            return self.value.lower() == other.value.lower()
        if isinstance(other, str):
            return self.value.lower() == other.lower()
        return False

    def __hash__(self) -> int:
        return hash(self.value.lower())
