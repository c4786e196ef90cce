"""Session token value object."""

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class SessionToken:
    """Opaque signed string asserting an authenticated identity.

    Stateless: nothing about the token is stored server-side.
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise ValueError("Session token cannot be empty")

    def to_dict(self) -> Dict[str, str]:
        """Wire representation returned to clients."""
        return {"token": self.value}

    def mask_for_logging(self) -> str:
        return self.value[:8] + "..."

    def __str__(self) -> str:
        return self.value
