"""Logging configuration utilities for numeris.

By default numeris is silent (NullHandler on the ``numeris`` logger).
Library modules only emit DEBUG traces; errors are raised, never logged.

Example usage:
    import numeris

    numeris.enable_console_logging(level="DEBUG")
    numeris.disable_logging()
"""

from __future__ import annotations

import logging
from typing import Literal

__all__ = [
    "disable_logging",
    "enable_console_logging",
    "set_level",
]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOGGER_NAME = "numeris"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _get_level(level: str | int) -> int:
    """Convert a level string or int to a logging level constant."""
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), logging.INFO)


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def _clear_handlers() -> None:
    """Remove and close all handlers except NullHandler."""
    logger = _get_logger()
    for handler in logger.handlers[:]:
        if not isinstance(handler, logging.NullHandler):
            logger.removeHandler(handler)
            handler.close()


def enable_console_logging(
    level: LogLevel | int = "INFO",
    format: str = DEFAULT_FORMAT,
    date_format: str = DEFAULT_DATE_FORMAT,
) -> logging.StreamHandler:
    """Enable console (stderr) logging for numeris.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL) or int.
        format: Log message format string.
        date_format: Date format string for %(asctime)s.

    Returns:
        The created StreamHandler.
    """
    logger = _get_logger()
    logger.setLevel(_get_level(level))

    handler = logging.StreamHandler()
    handler.setLevel(_get_level(level))
    handler.setFormatter(logging.Formatter(format, date_format))

    logger.addHandler(handler)
    return handler


def set_level(level: LogLevel | int) -> None:
    """Set the global log level for numeris."""
    _get_logger().setLevel(_get_level(level))


def disable_logging() -> None:
    """Remove all handlers and silence the numeris logger."""
    logger = _get_logger()
    _clear_handlers()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.CRITICAL + 1)
