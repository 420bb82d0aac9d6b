"""Structured logging setup shared by the server and the console demo."""

import logging
from typing import Optional

import structlog

from rulecheck.config import get_settings


def configure_logging(log_level: Optional[str] = None) -> None:
    """Configure structlog.

    Args:
        log_level: Minimum level name ("debug", "info", ...). If None, uses
            the LOG_LEVEL setting.
    """
    settings = get_settings()
    level = logging.getLevelName((log_level or settings.LOG_LEVEL).upper())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            level if isinstance(level, int) else logging.INFO
        ),
    )
