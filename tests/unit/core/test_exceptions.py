"""Tests for the exception hierarchy and the HTTP exception handlers."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from gatekeeper.core.exceptions import (
    DatabaseError,
    EmailServiceError,
    GatekeeperError,
    MalformedCredentialError,
    SessionSigningError,
    TemplateRenderError,
)
from gatekeeper.core.handlers import register_exception_handlers


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "exc_class, code",
        [
            (MalformedCredentialError, "malformed_credential"),
            (DatabaseError, "database_error"),
            (EmailServiceError, "email_service_error"),
            (TemplateRenderError, "template_render_error"),
            (SessionSigningError, "session_signing_error"),
        ],
    )
    def test_default_codes(self, exc_class, code):
        exc = exc_class("something failed")

        assert isinstance(exc, GatekeeperError)
        assert exc.code == code
        assert str(exc) == "something failed"

    def test_template_error_is_an_email_error(self):
        assert issubclass(TemplateRenderError, EmailServiceError)


def _app_raising(exc):
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return app


class TestExceptionHandlers:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc, status_code",
        [
            (DatabaseError("down"), 503),
            (EmailServiceError("smtp"), 502),
            (TemplateRenderError("missing"), 502),
            (SessionSigningError("bad key"), 500),
        ],
    )
    async def test_status_mapping(self, exc, status_code):
        transport = ASGITransport(app=_app_raising(exc))
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/boom")

        assert response.status_code == status_code
        assert "detail" in response.json()
