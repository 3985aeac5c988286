"""Structured logging with structlog.

Every event carries the service name, environment and version so logs from
several deployments can share one sink. SQLAlchemy and httpx are held at
WARNING unless the service itself runs at DEBUG.
"""

import logging
from collections.abc import MutableMapping
from typing import Any

import structlog

from motohub.config import Settings

SERVICE_NAME = "motohub-api"

_LIBRARY_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "httpx", "httpcore")


def service_context(settings: Settings) -> structlog.types.Processor:
    """Processor adding the deployment fields. Fields already on the event win."""
    fields = {
        "service": SERVICE_NAME,
        "environment": settings.environment,
        "version": settings.app_version,
    }

    def add_service_context(
        _logger: Any, _method: str, event_dict: MutableMapping[str, Any]  # noqa: ANN401
    ) -> MutableMapping[str, Any]:
        for key, value in fields.items():
            event_dict.setdefault(key, value)
        return event_dict

    return add_service_context


def _renderer(settings: Settings) -> structlog.types.Processor:
    if settings.log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=settings.debug)
    return structlog.processors.JSONRenderer()


def setup_logging(settings: Settings) -> None:
    """Configure structlog and the stdlib root logger from settings."""
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            service_context(settings),
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(settings),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=level, format="%(message)s")
    logging.getLogger().setLevel(level)
    library_level = level if level <= logging.DEBUG else max(level, logging.WARNING)
    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)
