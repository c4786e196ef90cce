from .notifier import FastMailNotifier, InMemoryNotifier
from .template_renderer import JinjaEmailTemplateRenderer

__all__ = ["FastMailNotifier", "InMemoryNotifier", "JinjaEmailTemplateRenderer"]
