"""Service interfaces for the authentication flow's outbound collaborators."""

from abc import ABC, abstractmethod

from gatekeeper.domain.entities.user import User
from gatekeeper.domain.value_objects.mail import MailMessage
from gatekeeper.domain.value_objects.session_token import SessionToken


class INotifier(ABC):
    """Delivers rendered emails."""

    @abstractmethod
    async def send(self, message: MailMessage) -> None:
        """Sends the message.

        Raises:
            EmailServiceError: If delivery fails.
        """
        raise NotImplementedError


class ISessionSigner(ABC):
    """Issues signed session tokens for verified users."""

    @abstractmethod
    async def issue(self, user: User) -> SessionToken:
        """Signs a session token asserting the user's identity.

        Raises:
            SessionSigningError: If the token cannot be signed.
        """
        raise NotImplementedError


class IEmailTemplateRenderer(ABC):
    """Renders email bodies."""

    @abstractmethod
    def render_activation_email(self, username: str, token_id: str) -> str:
        """Renders the activation email addressed to ``username``.

        The token identifier becomes the activation link parameter.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        raise NotImplementedError
