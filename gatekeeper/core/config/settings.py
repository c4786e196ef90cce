"""Main application settings and configuration management.

This module composes the settings from the different modules (app, auth,
database, email) into a single `Settings` class and exposes the `settings`
singleton used throughout the application.

Environment Support:
- Development: Uses .env, email test mode enabled
- Test: Uses .env.test when present, email test mode enabled
- Staging/Production: Uses .env.<env> when present, SMTP configuration validated
"""

import logging
import os
from pathlib import Path

from pydantic_settings import SettingsConfigDict

from .app import AppSettings
from .auth import AuthSettings
from .database import DatabaseSettings
from .email import EmailSettings

logger = logging.getLogger(__name__)
logging.getLogger("passlib").setLevel(logging.ERROR)


class Settings(AppSettings, AuthSettings, DatabaseSettings, EmailSettings):
    """The main settings class that aggregates all application configurations.

    Usage:
        - Access settings via the singleton instance `settings`.
        - Build throwaway instances in tests with keyword overrides.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        if self.APP_ENV in ("development", "test"):
            self.EMAIL_TEST_MODE = True

    def validate_required_fields(self) -> None:
        """Validates environment-dependent configuration.

        SMTP problems are fatal in staging and production and only logged
        elsewhere.

        Raises:
            ValueError: If the SMTP configuration is invalid outside development/test.
        """
        try:
            self.validate_smtp_config()
        except ValueError as e:
            if self.APP_ENV in ("development", "test"):
                logger.warning(f"Email config warning - {e}")
            else:
                logger.error(f"Email configuration error: {e}")
                raise
        logger.info(f"Application running in {self.APP_ENV} environment")


def create_settings() -> Settings:
    """Create settings instance with environment-specific configuration.

    Returns:
        Settings: Configured settings instance
    """
    env = os.getenv("APP_ENV", "development")
    env_file = {
        "test": ".env.test",
        "staging": ".env.staging",
        "production": ".env.production",
    }.get(env, ".env")

    if Path(env_file).exists():
        logger.info(f"Loading environment configuration from {env_file}")
        return Settings(_env_file=env_file)
    logger.info(f"No {env_file} file found, using environment variables only (environment: {env})")
    return Settings()


settings = create_settings()
settings.validate_required_fields()
