"""Structured logging for menu-kit.

Log events go to stderr so they never mix with command output on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from menu_kit_common.config import Settings, get_settings


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure structlog from settings.

    Safe to call more than once; the last call wins.
    """
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)

    renderer: structlog.typing.Processor
    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: Optional[str] = None) -> structlog.typing.FilteringBoundLogger:
    """Return a structlog logger whose events carry ``logger_name``.

    The logger stays lazy so a later ``configure_logging`` still applies to
    loggers created at import time.
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()
