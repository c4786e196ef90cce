"""User aggregate root."""

import uuid
from dataclasses import dataclass, field
from typing import List

from gatekeeper.domain.entities.token import Token
from gatekeeper.domain.value_objects.email import Email
from gatekeeper.domain.value_objects.password import HashedPassword
from gatekeeper.domain.value_objects.username import Username


@dataclass
class User:
    """Represents a user account and acts as the Aggregate Root for its tokens.

    Email and username are value objects, so a constructed `User` never holds
    an empty or malformed one. The token collection is append-only from the
    aggregate's point of view; persisting the relation is the job of the user
    directory and token store on save.

    Attributes:
        id: Unique identifier (UUID string).
        email: Validated, lowercase email address.
        username: Validated username.
        password: Bcrypt hash of the user's password.
        is_verified: Whether the email address has been verified. Unverified
            users cannot obtain a session.
        tokens: Tokens appended to this aggregate since it was loaded.
    """

    id: str
    email: Email
    username: Username
    password: HashedPassword
    is_verified: bool = False
    tokens: List[Token] = field(default_factory=list)

    def __post_init__(self):
        if not self.id:
            raise ValueError("User id cannot be empty")
        if not isinstance(self.email, Email):
            self.email = Email(self.email)
        if not isinstance(self.username, Username):
            self.username = Username(self.username)
        if not isinstance(self.password, HashedPassword):
            self.password = HashedPassword(self.password)

    @classmethod
    def create(
        cls,
        email: str,
        username: str,
        plain_password: str,
        is_verified: bool = False,
    ) -> "User":
        """Create a new user, hashing the plaintext password."""
        return cls(
            id=str(uuid.uuid4()),
            email=Email(email),
            username=Username(username),
            password=HashedPassword.from_plain_password(plain_password),
            is_verified=is_verified,
        )

    def add_token(self, token: Token) -> None:
        """Append a token owned by this user.

        Raises:
            ValueError: If the token belongs to a different user.
        """
        if token.user_id != self.id:
            raise ValueError("Token belongs to a different user")
        self.tokens.append(token)
