"""Mail value objects passed to the notifier."""

from dataclasses import dataclass
from typing import Any

from gatekeeper.domain.value_objects.email import mask_email


@dataclass(frozen=True)
class MailAddress:
    """Display name and address of a sender or recipient."""

    name: str
    email: str

    def formatted(self) -> str:
        """RFC 5322 form, ``"Name <address>"``, or the bare address without a name."""
        return f"{self.name} <{self.email}>" if self.name else self.email

    def mask_for_logging(self) -> str:
        return mask_email(self.email)


@dataclass(frozen=True)
class MailMessage:
    """A fully rendered email ready for delivery.

    Attributes:
        to: Recipient.
        sender: Sender identity, taken from `MailerConfig`.
        subject: Subject line.
        body: Rendered HTML body.
    """

    to: MailAddress
    sender: MailAddress
    subject: str
    body: str


@dataclass(frozen=True)
class MailerConfig:
    """Explicit sender identity and activation email subject.

    Built once from settings and handed to the authentication service and the
    notifier, so neither reads sender details from the process environment.
    """

    sender: MailAddress
    activation_subject: str

    @classmethod
    def from_settings(cls, settings: Any) -> "MailerConfig":
        return cls(
            sender=MailAddress(name=settings.FROM_NAME, email=str(settings.FROM_EMAIL)),
            activation_subject=settings.ACTIVATION_EMAIL_SUBJECT,
        )
