"""Authentication settings: session token signing and password hashing.
"""

import logging
from pathlib import Path

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

HMAC_ALGORITHMS = frozenset({"HS256", "HS384", "HS512"})
ASYMMETRIC_ALGORITHMS = frozenset({"RS256", "RS384", "RS512", "ES256", "ES384", "ES512"})


class AuthSettings(BaseSettings):
    """Defines settings for session token issuance and credential verification.

    HMAC algorithms sign with ``SECRET_KEY``. Asymmetric algorithms need
    ``JWT_PRIVATE_KEY``, taken from the environment or from a ``private.pem``
    file in the working directory (the file wins when both are present).

    Security Note:
        - Private keys must never be logged or committed to version control.
        - ``BCRYPT_ROUNDS`` below 10 is only acceptable in test environments.
    """

    JWT_ALGORITHM: str = "HS256"
    JWT_PRIVATE_KEY: SecretStr = SecretStr("")
    JWT_PUBLIC_KEY: str = ""
    JWT_ISSUER: str = "https://api.example.com"
    JWT_AUDIENCE: str = "gatekeeper:api:v1"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = Field(default=60, ge=1)

    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)

    # Attempts per stale activation token removal before the failure propagates
    TOKEN_REMOVAL_ATTEMPTS: int = Field(default=3, ge=1, le=10)

    @model_validator(mode="after")
    def _load_and_validate_signing_key(self) -> "AuthSettings":
        """Loads the private key for asymmetric algorithms and rejects unknown ones.

        Raises:
            ValueError: If the algorithm is unsupported or its key is missing.
        """
        algorithm = self.JWT_ALGORITHM.upper()
        if algorithm not in HMAC_ALGORITHMS | ASYMMETRIC_ALGORITHMS:
            raise ValueError(f"Unsupported JWT algorithm: {self.JWT_ALGORITHM}")
        self.JWT_ALGORITHM = algorithm

        if algorithm in ASYMMETRIC_ALGORITHMS:
            self._load_private_key_from_pem_file()
            if not self.JWT_PRIVATE_KEY.get_secret_value():
                error_msg = (
                    f"JWT_PRIVATE_KEY is required for {algorithm}. Provide it via the "
                    "environment or a private.pem file."
                )
                logger.error(error_msg)
                raise ValueError(error_msg)
        return self

    def _load_private_key_from_pem_file(self) -> None:
        private_key_path = Path("private.pem").resolve()
        if not private_key_path.is_file():
            return
        try:
            private_key = private_key_path.read_text().strip()
        except OSError as e:
            logger.error(f"Failed to read private.pem: {e!s}")
            return
        if private_key:
            self.JWT_PRIVATE_KEY = SecretStr(private_key)
            logger.info("Loaded JWT private key from private.pem, overriding env var if set.")
