"""Jinja2 rendering of email bodies."""

from pathlib import Path
from typing import Any, Optional
from urllib.parse import urlencode

from jinja2 import Environment, FileSystemLoader, TemplateError, TemplateNotFound
from structlog import get_logger

from gatekeeper.core.exceptions import TemplateRenderError
from gatekeeper.domain.interfaces.services import IEmailTemplateRenderer

logger = get_logger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[3] / "templates" / "email"


class JinjaEmailTemplateRenderer(IEmailTemplateRenderer):
    """Renders email templates from a directory with auto-escaping enabled.

    Attributes:
        activation_url_base: URL the activation token is appended to as the
            ``token`` query parameter.
    """

    ACTIVATION_TEMPLATE = "activation.html"

    def __init__(
        self,
        activation_url_base: str,
        templates_dir: Optional[str] = None,
        app_name: str = "Gatekeeper",
    ):
        self.activation_url_base = activation_url_base
        self._app_name = app_name
        self._jinja_env = Environment(
            loader=FileSystemLoader(str(templates_dir or DEFAULT_TEMPLATES_DIR)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )

    @classmethod
    def from_settings(cls, settings: Any) -> "JinjaEmailTemplateRenderer":
        return cls(
            activation_url_base=settings.ACTIVATION_URL_BASE,
            templates_dir=settings.EMAIL_TEMPLATES_DIR,
            app_name=settings.PROJECT_NAME,
        )

    def render_activation_email(self, username: str, token_id: str) -> str:
        return self.render(
            self.ACTIVATION_TEMPLATE,
            username=username,
            activation_url=self.activation_url(token_id),
            app_name=self._app_name,
        )

    def activation_url(self, token_id: str) -> str:
        separator = "&" if "?" in self.activation_url_base else "?"
        return f"{self.activation_url_base}{separator}{urlencode({'token': token_id})}"

    def render(self, template_name: str, **context: Any) -> str:
        """Render a template with the given context.

        Raises:
            TemplateRenderError: If the template is missing or fails to render.
        """
        try:
            rendered = self._jinja_env.get_template(template_name).render(**context)
        except TemplateNotFound as e:
            logger.error("Template not found", template=template_name)
            raise TemplateRenderError(f"Template file not found: {template_name}") from e
        except TemplateError as e:
            logger.error("Template rendering failed", template=template_name, error=str(e))
            raise TemplateRenderError(f"Template rendering failed: {e}") from e

        logger.debug("Template rendered", template=template_name, context_keys=sorted(context))
        return rendered
