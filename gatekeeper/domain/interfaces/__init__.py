"""Domain interfaces (ports)."""

from .repositories import ITokenStore, IUserDirectory
from .services import IEmailTemplateRenderer, INotifier, ISessionSigner

__all__ = [
    "IEmailTemplateRenderer",
    "INotifier",
    "ISessionSigner",
    "ITokenStore",
    "IUserDirectory",
]
