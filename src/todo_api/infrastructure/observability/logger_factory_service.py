"""Structlog setup for the task API.

configure_logging() installs one processor chain for structlog loggers and,
through ProcessorFormatter, for stdlib loggers such as uvicorn's.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from todo_api.infrastructure.configuration.main_settings import Settings
from todo_api.infrastructure.observability.logging.log_schema_processor import (
    log_schema_processor,
)

_JSON_ENVIRONMENTS = ("qa", "staging", "prod", "production")

_CONFIGURED = False


def configure_logging(settings: Settings) -> None:
    """Configure structlog and the root stdlib logger once per process."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    renderer = _select_renderer(settings)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        log_schema_processor,
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )
    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(settings.log_level.upper())


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Return a lazy structlog logger carrying context_component."""
    return structlog.get_logger(context_component=component)


def _select_renderer(settings: Settings) -> Any:
    """JSON for deployed environments or LOG_FORMAT=json, coloured console otherwise."""
    log_format = settings.log_format.lower()
    if log_format == "json" or (not log_format and settings.app_env.lower() in _JSON_ENVIRONMENTS):
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)
