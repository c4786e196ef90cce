"""JWT implementation of the session signer."""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from structlog import get_logger

from gatekeeper.core.config.auth import HMAC_ALGORITHMS
from gatekeeper.core.exceptions import SessionSigningError
from gatekeeper.domain.entities.user import User
from gatekeeper.domain.interfaces.services import ISessionSigner
from gatekeeper.domain.value_objects.session_token import SessionToken

logger = get_logger(__name__)


class JWTSessionSigner(ISessionSigner):
    """Issues stateless JWT session tokens.

    HMAC algorithms sign and verify with the shared secret; asymmetric ones
    sign with the private key and verify with the public key.

    Claims: ``sub`` (user id), ``email``, ``username``, ``iss``, ``aud``,
    ``iat``, ``exp`` and a random ``jti``.
    """

    def __init__(
        self,
        signing_key: str,
        algorithm: str = "HS256",
        issuer: str = "",
        audience: str = "",
        expires_in: timedelta = timedelta(minutes=60),
        verification_key: str = None,
    ):
        if not signing_key:
            raise SessionSigningError("A signing key is required")
        self._signing_key = signing_key
        self._verification_key = verification_key or (
            signing_key if algorithm in HMAC_ALGORITHMS else None
        )
        self._algorithm = algorithm
        self._issuer = issuer
        self._audience = audience
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Any) -> "JWTSessionSigner":
        if settings.JWT_ALGORITHM in HMAC_ALGORITHMS:
            signing_key = settings.SECRET_KEY
        else:
            signing_key = settings.JWT_PRIVATE_KEY.get_secret_value()
        return cls(
            signing_key=signing_key,
            algorithm=settings.JWT_ALGORITHM,
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            expires_in=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            verification_key=settings.JWT_PUBLIC_KEY or None,
        )

    async def issue(self, user: User) -> SessionToken:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user.id,
            "email": user.email.value,
            "username": user.username.value,
            "iss": self._issuer,
            "aud": self._audience,
            "iat": now,
            "exp": now + self._expires_in,
            "jti": secrets.token_urlsafe(32),
        }
        try:
            encoded = jwt.encode(payload, self._signing_key, algorithm=self._algorithm)
        except (jwt.PyJWTError, NotImplementedError, ValueError, TypeError) as e:
            logger.error("Session token signing failed", user_id=user.id, error_type=type(e).__name__)
            raise SessionSigningError("Failed to sign session token") from e

        logger.debug("Session token issued", user_id=user.id, jti=payload["jti"][:4] + "***")
        return SessionToken(encoded)

    def decode(self, token: str) -> Dict[str, Any]:
        """Verify a session token and return its claims.

        Raises:
            jwt.PyJWTError: If the signature, issuer, audience or expiry is invalid.
            SessionSigningError: If no verification key is configured.
        """
        if not self._verification_key:
            raise SessionSigningError("No verification key configured")
        return jwt.decode(
            token,
            self._verification_key,
            algorithms=[self._algorithm],
            issuer=self._issuer,
            audience=self._audience,
        )
