"""Email configuration settings for Gatekeeper.

This module defines the SMTP connection, the sender identity used for
activation emails and the activation link base URL.
"""

from typing import Optional

from pydantic import AliasChoices, EmailStr, Field, SecretStr
from pydantic_settings import BaseSettings


class EmailSettings(BaseSettings):
    """Email configuration settings with secure defaults and validation.

    The sender identity also answers to the legacy ``MAILER_DISPLAY_NAME`` and
    ``MAILER_USERNAME`` variables.

    Attributes:
        SMTP_HOST: SMTP server hostname
        SMTP_PORT: SMTP server port (587 for STARTTLS, 465 for SSL)
        SMTP_USERNAME: SMTP authentication username
        SMTP_PASSWORD: SMTP authentication password (SecretStr)
        SMTP_USE_TLS: Upgrade the connection with STARTTLS
        SMTP_USE_SSL: Connect over implicit SSL
        FROM_EMAIL: Sender email address
        FROM_NAME: Sender display name
        ACTIVATION_EMAIL_SUBJECT: Subject line of the activation email
        ACTIVATION_URL_BASE: Base URL the activation token is appended to
        EMAIL_TEMPLATES_DIR: Directory containing email templates
        EMAIL_TEST_MODE: Log emails instead of sending them
    """

    SMTP_HOST: str = Field(default="localhost", description="SMTP server hostname")
    SMTP_PORT: int = Field(default=587, ge=1, le=65535)
    SMTP_USERNAME: Optional[str] = None
    SMTP_PASSWORD: Optional[SecretStr] = None
    SMTP_USE_TLS: bool = True
    SMTP_USE_SSL: bool = False

    FROM_EMAIL: EmailStr = Field(
        default="noreply@example.com",
        validation_alias=AliasChoices("FROM_EMAIL", "MAILER_USERNAME"),
        description="Sender email address",
    )
    FROM_NAME: str = Field(
        default="Gatekeeper",
        validation_alias=AliasChoices("FROM_NAME", "MAILER_DISPLAY_NAME"),
        description="Sender display name",
    )

    ACTIVATION_EMAIL_SUBJECT: str = "Activate your account"
    ACTIVATION_URL_BASE: str = Field(
        default="http://localhost:3000/activate",
        description="Frontend URL receiving the activation token as a query parameter",
    )

    EMAIL_TEMPLATES_DIR: Optional[str] = Field(
        default=None,
        description="Directory containing email templates; defaults to the bundled templates",
    )
    EMAIL_TEST_MODE: bool = Field(
        default=False,
        description="Enable test mode (emails logged instead of sent)",
    )

    def validate_smtp_config(self) -> None:
        """Validate SMTP configuration for production use.

        Raises:
            ValueError: If SMTP configuration is invalid or insecure
        """
        if self.EMAIL_TEST_MODE:
            return
        if self.SMTP_USE_TLS and self.SMTP_USE_SSL:
            raise ValueError("SMTP_USE_TLS and SMTP_USE_SSL are mutually exclusive")
        if self.SMTP_USERNAME and not self.SMTP_PASSWORD:
            raise ValueError("SMTP_PASSWORD is required when SMTP_USERNAME is set")
