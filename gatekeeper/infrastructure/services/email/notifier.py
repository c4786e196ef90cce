"""Email notifier implementations.

`FastMailNotifier` delivers through SMTP with fastapi-mail. In test mode it
logs the message instead of sending it. `InMemoryNotifier` records messages
for assertions in tests.
"""

from typing import Any, List

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from structlog import get_logger

from gatekeeper.core.exceptions import EmailServiceError
from gatekeeper.domain.interfaces.services import INotifier
from gatekeeper.domain.value_objects.mail import MailerConfig, MailMessage

logger = get_logger(__name__)


class FastMailNotifier(INotifier):
    """SMTP notifier backed by fastapi-mail.

    fastapi-mail binds the sender to the connection, so messages are always
    sent from the `MailerConfig` identity handed to the constructor.
    """

    def __init__(self, email_settings: Any, mailer_config: MailerConfig):
        """Initialize the notifier.

        Args:
            email_settings: Object exposing the ``SMTP_*`` and ``EMAIL_TEST_MODE`` fields.
            mailer_config: Sender identity.

        Raises:
            EmailServiceError: If the SMTP configuration is rejected.
        """
        self._mailer_config = mailer_config
        self._test_mode = email_settings.EMAIL_TEST_MODE
        self._fastmail = None if self._test_mode else self._build_fastmail(email_settings)

        logger.info(
            "Email notifier initialized",
            test_mode=self._test_mode,
            smtp_host=email_settings.SMTP_HOST,
        )

    def _build_fastmail(self, email_settings: Any) -> FastMail:
        password = email_settings.SMTP_PASSWORD
        try:
            config = ConnectionConfig(
                MAIL_USERNAME=email_settings.SMTP_USERNAME or "",
                MAIL_PASSWORD=password.get_secret_value() if password else "",
                MAIL_FROM=self._mailer_config.sender.email,
                MAIL_FROM_NAME=self._mailer_config.sender.name,
                MAIL_PORT=email_settings.SMTP_PORT,
                MAIL_SERVER=email_settings.SMTP_HOST,
                MAIL_STARTTLS=email_settings.SMTP_USE_TLS,
                MAIL_SSL_TLS=email_settings.SMTP_USE_SSL,
                USE_CREDENTIALS=bool(email_settings.SMTP_USERNAME and password),
                VALIDATE_CERTS=True,
            )
        except ValueError as e:
            logger.error("Failed to configure FastMail", error=str(e))
            raise EmailServiceError(f"Failed to configure email service: {e}") from e
        return FastMail(config)

    async def send(self, message: MailMessage) -> None:
        if self._test_mode:
            logger.info(
                "Email (test mode)",
                to=message.to.mask_for_logging(),
                subject=message.subject,
                body_length=len(message.body),
            )
            return

        schema = MessageSchema(
            subject=message.subject,
            recipients=[message.to.formatted()],
            body=message.body,
            subtype=MessageType.html,
        )
        try:
            await self._fastmail.send_message(schema)
        except Exception as e:
            logger.error(
                "Failed to send email",
                to=message.to.mask_for_logging(),
                error=str(e),
                error_type=type(e).__name__,
            )
            raise EmailServiceError(f"Failed to send email: {e}") from e

        logger.info("Email sent", to=message.to.mask_for_logging(), subject=message.subject)


class InMemoryNotifier(INotifier):
    """Collects sent messages in `sent`."""

    def __init__(self):
        self.sent: List[MailMessage] = []

    async def send(self, message: MailMessage) -> None:
        self.sent.append(message)
