"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog,
with JSON output for production and human-readable console output for
development.
"""

import logging

import structlog

from gatekeeper.core.config.settings import settings


def configure_logging(log_level: str = None, json_logs: bool = None) -> None:
    """
    Configures structlog and the standard library root logger.

    The processor chain adds context variables, an ISO timestamp and the log
    level, then renders JSON (``LOG_JSON=True``) or console output.

    Args:
        log_level: Overrides ``settings.LOG_LEVEL``.
        json_logs: Overrides ``settings.LOG_JSON``.
    """
    level = (log_level or settings.LOG_LEVEL).upper()
    use_json = settings.LOG_JSON if json_logs is None else json_logs

    logging.basicConfig(format="%(message)s", level=level)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


logger = structlog.get_logger()
