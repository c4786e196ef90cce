"""Security utilities for password hashing and verification.

Both helpers share one passlib context configured from ``BCRYPT_ROUNDS``.
"""

from passlib.context import CryptContext

from gatekeeper.core.config.settings import settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt.

    Args:
        password: Plain text password to hash

    Returns:
        str: Bcrypt-hashed password
    """
    return pwd_context.hash(password)


def verify_password(password: str, hashed_password: str) -> bool:
    """Verify a password against its hash.

    Uses bcrypt's constant-time comparison, so the time taken does not depend
    on how many leading characters match.

    Args:
        password: Plain text password to verify
        hashed_password: Bcrypt hash to verify against

    Returns:
        bool: True if password matches hash
    """
    return pwd_context.verify(password, hashed_password)
