"""Outcome of an authentication attempt.

An attempt ends in exactly one of two shapes: ``Success`` carrying the issued
value, or ``Failure`` carrying an `AuthError`. Rejections are ordinary return
values; only infrastructure faults are raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Tuple, TypeVar, Union

from gatekeeper.domain.value_objects.session_token import SessionToken

T = TypeVar("T")
E = TypeVar("E")


class AuthError(Enum):
    """Reasons an authentication attempt is rejected.

    Each member carries a client-facing message and an HTTP-equivalent status.

    Attributes:
        INVALID_CREDENTIAL_FORMAT: The credential string could not be decoded.
        ACCOUNT_NOT_FOUND: No user matches the email.
        INVALID_PASSWORD: The password does not match the stored hash.
        ACCOUNT_NOT_ACTIVATED: Valid credentials, but the email is unverified.
            A fresh activation email has already been sent.
    """

    INVALID_CREDENTIAL_FORMAT = ("Invalid credential format", 400)
    ACCOUNT_NOT_FOUND = ("Account not exists", 404)
    INVALID_PASSWORD = ("Invalid password", 400)
    ACCOUNT_NOT_ACTIVATED = ("Account not activated", 403)

    @property
    def message(self) -> str:
        return self.value[0]

    @property
    def status_code(self) -> int:
        return self.value[1]

    def as_tuple(self) -> Tuple[str, int]:
        """Returns the ``(error_message, status_code)`` wire pair."""
        return self.value


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False


AuthResult = Union[Success[SessionToken], Failure[AuthError]]
