"""Logging setup for azwrap."""

from __future__ import annotations

import logging

LOGGER_NAME = "azwrap"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach a console handler to the azwrap logger.

    The root logger is left alone. Calling this again only updates the level.

    Args:
        level: Logging level as a number or name

    Returns:
        The azwrap package logger
    """
    if isinstance(level, str):
        level = level.upper()

    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.setLevel(level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
