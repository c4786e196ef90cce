import os

# Settings are read once at import time, so the test environment must be in
# place before anything from gatekeeper is imported.
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-characters-long")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./gatekeeper-test.db")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("LOG_JSON", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from gatekeeper.domain.services.authentication import AuthenticationService
from gatekeeper.domain.value_objects.mail import MailAddress, MailerConfig
from gatekeeper.infrastructure.repositories import InMemoryTokenStore, InMemoryUserDirectory
from gatekeeper.infrastructure.services.email import InMemoryNotifier, JinjaEmailTemplateRenderer
from gatekeeper.infrastructure.services.jwt_session_signer import JWTSessionSigner
from tests.factories.user import DEFAULT_PASSWORD, create_fake_user

TEST_SIGNING_KEY = os.environ["SECRET_KEY"]


@pytest.fixture
def mailer_config():
    return MailerConfig(
        sender=MailAddress(name="Gatekeeper", email="noreply@example.com"),
        activation_subject="Activate your account",
    )


@pytest.fixture
def token_store():
    return InMemoryTokenStore()


@pytest.fixture
def user_directory(token_store):
    return InMemoryUserDirectory(token_store)


@pytest.fixture
def notifier():
    return InMemoryNotifier()


@pytest.fixture
def session_signer():
    return JWTSessionSigner(
        signing_key=TEST_SIGNING_KEY,
        issuer="https://test.example.com",
        audience="gatekeeper:test",
    )


@pytest.fixture
def template_renderer():
    return JinjaEmailTemplateRenderer(activation_url_base="https://app.example.com/activate")


@pytest.fixture
def auth_service(
    user_directory, token_store, notifier, session_signer, template_renderer, mailer_config
):
    return AuthenticationService(
        user_directory=user_directory,
        token_store=token_store,
        notifier=notifier,
        session_signer=session_signer,
        template_renderer=template_renderer,
        mailer_config=mailer_config,
        token_removal_attempts=3,
    )


@pytest_asyncio.fixture
async def verified_user(user_directory):
    user = create_fake_user(is_verified=True)
    await user_directory.create(user)
    return user


@pytest_asyncio.fixture
async def unverified_user(user_directory):
    user = create_fake_user(is_verified=False)
    await user_directory.create(user)
    return user


@pytest.fixture
def password():
    return DEFAULT_PASSWORD


@pytest_asyncio.fixture
async def async_client(auth_service):
    """HTTP client against the app, wired to the in-memory service."""
    from gatekeeper.infrastructure.dependency_injection.auth_dependencies import (
        get_authentication_service,
    )
    from gatekeeper.main import app

    app.dependency_overrides[get_authentication_service] = lambda: auth_service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
