"""Dependency wiring for the authentication flow.

FastAPI resolves `get_authentication_service` per request. Stateless
collaborators (signer, renderer, notifier, mailer config) are built once per
process; repositories are cheap wrappers around the shared session factory.
"""

from functools import lru_cache

from fastapi import Depends

from gatekeeper.core.config.settings import settings
from gatekeeper.domain.interfaces import (
    IEmailTemplateRenderer,
    INotifier,
    ISessionSigner,
    ITokenStore,
    IUserDirectory,
)
from gatekeeper.domain.services.authentication import AuthenticationService
from gatekeeper.domain.value_objects.mail import MailerConfig
from gatekeeper.infrastructure.database.async_db import get_session_factory
from gatekeeper.infrastructure.repositories import SQLTokenStore, SQLUserDirectory
from gatekeeper.infrastructure.services.email import FastMailNotifier, JinjaEmailTemplateRenderer
from gatekeeper.infrastructure.services.jwt_session_signer import JWTSessionSigner


@lru_cache(maxsize=1)
def get_mailer_config() -> MailerConfig:
    return MailerConfig.from_settings(settings)


@lru_cache(maxsize=1)
def get_notifier() -> INotifier:
    return FastMailNotifier(settings, get_mailer_config())


@lru_cache(maxsize=1)
def get_session_signer() -> ISessionSigner:
    return JWTSessionSigner.from_settings(settings)


@lru_cache(maxsize=1)
def get_template_renderer() -> IEmailTemplateRenderer:
    return JinjaEmailTemplateRenderer.from_settings(settings)


def get_user_directory() -> IUserDirectory:
    return SQLUserDirectory(get_session_factory())


def get_token_store() -> ITokenStore:
    return SQLTokenStore(get_session_factory())


def get_authentication_service(
    user_directory: IUserDirectory = Depends(get_user_directory),
    token_store: ITokenStore = Depends(get_token_store),
    notifier: INotifier = Depends(get_notifier),
    session_signer: ISessionSigner = Depends(get_session_signer),
    template_renderer: IEmailTemplateRenderer = Depends(get_template_renderer),
) -> AuthenticationService:
    return AuthenticationService(
        user_directory=user_directory,
        token_store=token_store,
        notifier=notifier,
        session_signer=session_signer,
        template_renderer=template_renderer,
        mailer_config=get_mailer_config(),
        token_removal_attempts=settings.TOKEN_REMOVAL_ATTEMPTS,
    )
