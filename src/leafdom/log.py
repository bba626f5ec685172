"""Logging setup for the command-line entry point."""

from __future__ import annotations

import logging

LOGGER_NAME = "leafdom"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the ``leafdom`` logger at ``level``.

    Library modules only emit records; handlers are installed here, once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
