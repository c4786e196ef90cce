"""Persistence adapters for the user directory and token store."""

from .in_memory import InMemoryTokenStore, InMemoryUserDirectory
from .token_repository import SQLTokenStore
from .user_repository import SQLUserDirectory

__all__ = [
    "InMemoryTokenStore",
    "InMemoryUserDirectory",
    "SQLTokenStore",
    "SQLUserDirectory",
]
