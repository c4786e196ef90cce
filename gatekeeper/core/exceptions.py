"""Structured exception hierarchy for Gatekeeper.

Business rejections of an authentication attempt are returned as values
(see ``gatekeeper.domain.value_objects.auth_result``). The exceptions here
cover malformed input inside the credential codec and infrastructure
failures, which propagate to the caller. Each carries a machine-readable
``code`` and a human-readable ``message``.
"""

from typing import Final

__all__: Final = [
    "GatekeeperError",
    "MalformedCredentialError",
    "DatabaseError",
    "EmailServiceError",
    "TemplateRenderError",
    "SessionSigningError",
]


class GatekeeperError(Exception):
    """Base exception class for all custom errors in the application.

    Attributes:
        message (str): A human-readable error message, suitable for logging.
        code (str): A unique, machine-readable error code.
    """

    message: str
    code: str = "generic_error"

    def __init__(self, message: str, code: str = "generic_error"):
        self.message = message
        self.code = code
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Input errors
# ---------------------------------------------------------------------------


class MalformedCredentialError(GatekeeperError):
    """Raised when a transport credential string cannot be decoded.

    Covers a missing scheme separator, invalid base64 and a payload without
    the ``email:password`` colon. The authentication service turns it into a
    rejection, never a crash.
    """

    def __init__(self, message: str, code: str = "malformed_credential"):
        super().__init__(message, code)


# ---------------------------------------------------------------------------
# Infrastructure errors (typically map to 5xx)
# ---------------------------------------------------------------------------


class DatabaseError(GatekeeperError):
    """Raised for persistence failures in the user directory or token store.

    Wraps driver errors so callers do not depend on SQLAlchemy. Transient
    failures during stale token removal are retried before this propagates.
    """

    def __init__(self, message: str, code: str = "database_error"):
        super().__init__(message, code)


class EmailServiceError(GatekeeperError):
    """Raised when the notifier cannot deliver an email."""

    def __init__(self, message: str, code: str = "email_service_error"):
        super().__init__(message, code)


class TemplateRenderError(EmailServiceError):
    """Raised when an email template is missing or fails to render."""

    def __init__(self, message: str, code: str = "template_render_error"):
        super().__init__(message, code)


class SessionSigningError(GatekeeperError):
    """Raised when a session token cannot be signed (e.g. an invalid key)."""

    def __init__(self, message: str, code: str = "session_signing_error"):
        super().__init__(message, code)
