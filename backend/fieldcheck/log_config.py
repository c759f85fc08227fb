"""structlog configuration.

Console renderer for humans, JSON lines when ``LOG_JSON`` is set.
"""

import logging
from typing import Optional

import structlog

from fieldcheck.config import Settings, get_settings


def resolve_level(name: str) -> int:
    """Map a level name like ``"info"`` to its numeric value (unknown → INFO)."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog processors and level filtering from settings."""
    settings = settings or get_settings()

    if settings.LOG_JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=settings.DEBUG)

    level = logging.DEBUG if settings.DEBUG else resolve_level(settings.LOG_LEVEL)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )
