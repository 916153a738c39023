"""Logging helpers for the wall_clock package."""

from __future__ import annotations

import logging

from wall_clock.core.settings import Settings, settings

LOGGER_NAME = "wall_clock"


def configure_logging(config: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the package logger.

    Handlers are left to the application; the package only ships a
    ``NullHandler``.

    Args:
        config: Settings to read the level from (defaults to the module settings).

    Returns:
        The configured ``wall_clock`` logger.
    """
    active = config or settings
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(active.log_level_number)
    return logger
