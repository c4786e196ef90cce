"""Translation between domain entities and SQLModel records."""

from datetime import timezone

from gatekeeper.domain.entities.token import Token, TokenType
from gatekeeper.domain.entities.user import User
from gatekeeper.domain.value_objects.email import Email
from gatekeeper.domain.value_objects.password import HashedPassword
from gatekeeper.domain.value_objects.username import Username
from gatekeeper.infrastructure.database.models import TokenRecord, UserRecord


def user_to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        email=user.email.value,
        username=user.username.value,
        password_hash=user.password.value,
        is_verified=user.is_verified,
    )


def record_to_user(record: UserRecord) -> User:
    """Builds a `User` without its token relation."""
    return User(
        id=record.id,
        email=Email(record.email),
        username=Username(record.username),
        password=HashedPassword(record.password_hash),
        is_verified=record.is_verified,
    )


def token_to_record(token: Token) -> TokenRecord:
    return TokenRecord(
        id=token.id,
        type=token.type.value,
        user_id=token.user_id,
        used=token.used,
        created_at=token.created_at,
    )


def record_to_token(record: TokenRecord) -> Token:
    created_at = record.created_at
    # SQLite hands back naive datetimes
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Token(
        id=record.id,
        type=TokenType(record.type),
        user_id=record.user_id,
        used=record.used,
        created_at=created_at,
    )
