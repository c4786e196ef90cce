"""Domain entities."""

from .token import Token, TokenType
from .user import User

__all__ = ["Token", "TokenType", "User"]
