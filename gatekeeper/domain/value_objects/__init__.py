"""Domain value objects."""

from .auth_result import AuthError, AuthResult, Failure, Success
from .credential import Credential
from .email import Email
from .mail import MailAddress, MailerConfig, MailMessage
from .password import HashedPassword
from .session_token import SessionToken
from .username import Username

__all__ = [
    "AuthError",
    "AuthResult",
    "Credential",
    "Email",
    "Failure",
    "HashedPassword",
    "MailAddress",
    "MailerConfig",
    "MailMessage",
    "SessionToken",
    "Success",
    "Username",
]
