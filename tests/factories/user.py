"""Factory for generating fake users for testing."""

from functools import lru_cache
from typing import Optional

from faker import Faker

from gatekeeper.domain.entities.user import User
from gatekeeper.domain.value_objects.password import HashedPassword

fake = Faker()

DEFAULT_PASSWORD = "Correct-Horse-9"


@lru_cache(maxsize=None)
def _hash_for(plain_password: str) -> str:
    return HashedPassword.from_plain_password(plain_password).value


def fake_username() -> str:
    """A username that satisfies `Username` validation."""
    return f"{fake.lexify('????????').lower()}{fake.unique.random_int(min=100, max=999999)}"


def create_fake_user(
    id: Optional[str] = None,
    email: Optional[str] = None,
    username: Optional[str] = None,
    password: str = DEFAULT_PASSWORD,
    is_verified: bool = True,
) -> User:
    """Create a fake `User` entity for testing.

    Args:
        id: User id, defaults to a random UUID.
        email: Email, defaults to a unique fake email.
        username: Username, defaults to a unique fake username.
        password: Plaintext password to hash.
        is_verified: Whether the email is verified.

    Returns:
        User: A fake User entity.
    """
    return User(
        id=id if id is not None else fake.uuid4(),
        email=email if email is not None else fake.unique.email(),
        username=username if username is not None else fake_username(),
        password=HashedPassword(_hash_for(password)),
        is_verified=is_verified,
    )
