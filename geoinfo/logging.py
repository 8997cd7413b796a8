"""Logging setup for geoinfo events."""

from __future__ import annotations

import logging

import structlog
from structlog._config import BoundLoggerLazyProxy

from .settings import Settings, get_settings


def configure_logging(
    level: str | None = None,
    *,
    settings: Settings | None = None,
) -> None:
    """
    Route geoinfo events through structlog at the configured level.

    Events are rendered as JSON lines, or as readable console lines when
    settings.log_json is off. The root stdlib logger gets the same level.
    """
    resolved_settings = settings or get_settings()
    numeric_level = getattr(logging, (level or resolved_settings.log_level).upper(), logging.INFO)

    if not logging.getLogger().handlers:
        logging.basicConfig(format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    logging.getLogger().setLevel(numeric_level)

    renderer = structlog.processors.JSONRenderer() if resolved_settings.log_json else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger whose events carry the module name as ``logger``."""
    return BoundLoggerLazyProxy(None, initial_values={"logger": name})
