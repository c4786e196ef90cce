"""
Application-specific settings.
"""
from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """
    Defines application-wide settings like project name, environment and logging.

    Security Note:
        - SECRET_KEY must be a cryptographically secure random string
          (minimum 32 characters). It signs session tokens when an HMAC
          algorithm is configured.
    """
    PROJECT_NAME: str = "gatekeeper"
    VERSION: str = "0.1.0"
    APP_ENV: str = "development"
    DEBUG: bool = False

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    SECRET_KEY: str = Field(..., min_length=32)
