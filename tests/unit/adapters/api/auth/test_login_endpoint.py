"""Tests for POST /api/v1/auth/login."""

from unittest.mock import AsyncMock

import pytest

from gatekeeper.core.exceptions import DatabaseError
from gatekeeper.domain.services.credential_codec import CredentialCodec

LOGIN_URL = "/api/v1/auth/login"


def _auth_header(email, password):
    return {"Authorization": CredentialCodec.encode(email, password)}


class TestLoginEndpoint:
    @pytest.mark.asyncio
    async def test_verified_user_receives_token(
        self, async_client, verified_user, password, session_signer
    ):
        response = await async_client.post(
            LOGIN_URL, headers=_auth_header(verified_user.email.value, password)
        )

        assert response.status_code == 200
        token = response.json()["token"]
        assert session_signer.decode(token)["sub"] == verified_user.id

    @pytest.mark.asyncio
    async def test_missing_header_is_bad_request(self, async_client):
        response = await async_client.post(LOGIN_URL)

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid credential format"}

    @pytest.mark.asyncio
    async def test_malformed_header_is_bad_request(self, async_client):
        response = await async_client.post(LOGIN_URL, headers={"Authorization": "Basic %%%"})

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid credential format"}

    @pytest.mark.asyncio
    async def test_unknown_account_is_not_found(self, async_client):
        response = await async_client.post(
            LOGIN_URL, headers=_auth_header("ghost@example.com", "whatever")
        )

        assert response.status_code == 404
        assert response.json() == {"detail": "Account not exists"}

    @pytest.mark.asyncio
    async def test_wrong_password_is_bad_request(self, async_client, verified_user):
        response = await async_client.post(
            LOGIN_URL, headers=_auth_header(verified_user.email.value, "wrong-password")
        )

        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid password"}

    @pytest.mark.asyncio
    async def test_unverified_user_is_forbidden_and_emailed(
        self, async_client, unverified_user, password, notifier
    ):
        response = await async_client.post(
            LOGIN_URL, headers=_auth_header(unverified_user.email.value, password)
        )

        assert response.status_code == 403
        assert response.json() == {"detail": "Account not activated"}
        assert len(notifier.sent) == 1

    @pytest.mark.asyncio
    async def test_database_failure_is_service_unavailable(
        self, async_client, user_directory, mocker
    ):
        mocker.patch.object(
            user_directory, "find_one", new=AsyncMock(side_effect=DatabaseError("db down"))
        )

        response = await async_client.post(
            LOGIN_URL, headers=_auth_header("anyone@example.com", "pw")
        )

        assert response.status_code == 503
        assert response.json() == {"detail": "Service temporarily unavailable"}
