"""Tests for the JWT session signer."""

from datetime import timedelta
from types import SimpleNamespace

import jwt
import pytest
from pydantic import SecretStr

from gatekeeper.core.exceptions import SessionSigningError
from gatekeeper.infrastructure.services.jwt_session_signer import JWTSessionSigner
from tests.factories.user import create_fake_user

SIGNING_KEY = "unit-test-signing-key-with-enough-length!"


@pytest.fixture
def signer():
    return JWTSessionSigner(
        signing_key=SIGNING_KEY,
        issuer="https://issuer.example.com",
        audience="gatekeeper:test",
        expires_in=timedelta(minutes=5),
    )


class TestJWTSessionSigner:
    @pytest.mark.asyncio
    async def test_issue_contains_identity_claims(self, signer):
        user = create_fake_user()

        token = await signer.issue(user)
        claims = signer.decode(token.value)

        assert claims["sub"] == user.id
        assert claims["email"] == user.email.value
        assert claims["username"] == user.username.value
        assert claims["iss"] == "https://issuer.example.com"
        assert claims["aud"] == "gatekeeper:test"
        assert claims["exp"] - claims["iat"] == 300
        assert claims["jti"]

    @pytest.mark.asyncio
    async def test_each_token_is_unique(self, signer):
        user = create_fake_user()

        first = await signer.issue(user)
        second = await signer.issue(user)

        assert first.value != second.value

    @pytest.mark.asyncio
    async def test_decode_rejects_foreign_signature(self, signer):
        other = JWTSessionSigner(
            signing_key="another-signing-key-with-enough-length!!",
            issuer="https://issuer.example.com",
            audience="gatekeeper:test",
        )
        token = await other.issue(create_fake_user())

        with pytest.raises(jwt.InvalidSignatureError):
            signer.decode(token.value)

    @pytest.mark.asyncio
    async def test_decode_rejects_wrong_audience(self, signer):
        other = JWTSessionSigner(
            signing_key=SIGNING_KEY,
            issuer="https://issuer.example.com",
            audience="someone-else",
        )
        token = await other.issue(create_fake_user())

        with pytest.raises(jwt.InvalidAudienceError):
            signer.decode(token.value)

    @pytest.mark.asyncio
    async def test_invalid_key_raises_signing_error(self):
        signer = JWTSessionSigner(signing_key="not-a-pem-key", algorithm="RS256")

        with pytest.raises(SessionSigningError):
            await signer.issue(create_fake_user())

    def test_empty_key_is_rejected(self):
        with pytest.raises(SessionSigningError):
            JWTSessionSigner(signing_key="")

    def test_from_settings_uses_secret_key_for_hmac(self):
        settings = SimpleNamespace(
            JWT_ALGORITHM="HS256",
            SECRET_KEY=SIGNING_KEY,
            JWT_PRIVATE_KEY=SecretStr(""),
            JWT_PUBLIC_KEY="",
            JWT_ISSUER="https://issuer.example.com",
            JWT_AUDIENCE="gatekeeper:test",
            ACCESS_TOKEN_EXPIRE_MINUTES=15,
        )

        signer = JWTSessionSigner.from_settings(settings)

        assert signer._signing_key == SIGNING_KEY
        assert signer._verification_key == SIGNING_KEY
        assert signer._expires_in == timedelta(minutes=15)
