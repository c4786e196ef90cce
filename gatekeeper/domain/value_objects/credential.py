"""Decoded login credential."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Credential:
    """Transient (email, plaintext password) pair of one authentication attempt.

    Never persisted. The password is excluded from ``repr`` so the object can
    appear in tracebacks and logs safely.
    """

    email: str
    password: str = field(repr=False)
