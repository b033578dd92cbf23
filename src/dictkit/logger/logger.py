"""Logging for the dictkit package.

Importing dictkit only gives the ``dictkit`` logger a ``NullHandler`` and the
level from :mod:`dictkit.core.config`; records still propagate to whatever
the host application configured. Call :func:`setup_logger` to get console
output without configuring logging yourself.
"""

import logging
import sys

from dictkit.core.config import settings

__all__ = ["logger", "setup_logger"]

PACKAGE_LOGGER = "dictkit"


def _console_handler(logger: logging.Logger) -> logging.Handler | None:
    for handler in logger.handlers:
        if type(handler) is logging.StreamHandler:
            return handler
    return None


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_string: str | None = None,
    propagate: bool = True,
) -> logging.Logger:
    """
    Attach a stdout handler to a logger and return it.

    Args:
        name: Logger name (module loggers under ``dictkit.`` propagate here)
        level: Log level (NOTSET, DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        propagate: Pass False when the root logger already prints, to avoid
            duplicate lines

    Returns:
        Configured logger instance
    """
    level = level or settings.LOG_LEVEL
    format_string = format_string or settings.LOG_FORMAT

    logger = logging.getLogger(name)

    # Only configure if no console handler is attached yet
    if _console_handler(logger) is None:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level.upper()))
        logger.propagate = propagate

    return logger


logger = logging.getLogger(PACKAGE_LOGGER)
logger.addHandler(logging.NullHandler())
logger.setLevel(getattr(logging, settings.LOG_LEVEL))
