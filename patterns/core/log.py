"""Logging setup for the patterns package."""

from __future__ import annotations

import logging

from .config import get_settings

LOGGER_NAME = "patterns"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class PackageHandler(logging.StreamHandler):
    """Stream handler installed by configure_logging()."""


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this more than once replaces nothing; the existing handler is
    kept and only the level is updated.

    Args:
        level: Log level to apply (defaults to ``Settings.log_level``)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    if not any(isinstance(h, PackageHandler) for h in logger.handlers):
        handler = PackageHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
