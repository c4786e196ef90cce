"""SQLModel table definitions for users and their tokens.

Records are persistence shapes only; repositories translate them to and from
the domain `User` and `Token`.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, DateTime, String
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRecord(SQLModel, table=True):
    """Row in the ``users`` table."""

    __tablename__ = "users"

    id: str = Field(primary_key=True, max_length=36)
    email: str = Field(
        sa_column=Column(String(254), unique=True, index=True, nullable=False),
        description="Lowercase email address.",
    )
    username: str = Field(
        sa_column=Column(String(30), unique=True, index=True, nullable=False),
    )
    password_hash: str = Field(max_length=60, description="Bcrypt hash.")
    is_verified: bool = Field(default=False)
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        sa_column=Column(DateTime(timezone=True), nullable=True),
    )


class TokenRecord(SQLModel, table=True):
    """Row in the ``tokens`` table."""

    __tablename__ = "tokens"

    id: str = Field(primary_key=True, max_length=36)
    type: str = Field(max_length=32, index=True)
    user_id: str = Field(foreign_key="users.id", index=True, max_length=36)
    used: bool = Field(default=False)
    created_at: datetime = Field(
        default_factory=_utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )
