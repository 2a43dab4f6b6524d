"""Structured logging configuration.

This module initializes structlog with a stable JSON format on stderr,
leaving stdout to command output and the passed-through kubectl streams.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from core.constants import DEFAULT_LOG_LEVEL


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog processors and the minimum log level.

    Args:
        level: Lowercase level name such as ``info`` or ``debug``.
    """
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(_level_number(level)),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:
    """Return a module logger instance.

    Args:
        name: Logger name, usually __name__.

    Returns:
        A structlog logger bound to the module name.
    """
    return structlog.get_logger(name)


def _stderr_logger_factory(*args: Any) -> Any:
    """Bind to the current stderr on every call so redirected streams are honored."""
    return structlog.PrintLogger(sys.stderr)


def _level_number(level: str) -> int:
    level_number = logging.getLevelName(level.upper())
    return level_number if isinstance(level_number, int) else logging.INFO
