"""Logging setup shared by the API and the command line entry point.

Modules keep using ``logging.getLogger(__name__)``; this only installs one
stream handler with a consistent format on the package logger.
"""
import logging

from weekmenu.utilities.config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_configured = False


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """Configure the ``weekmenu`` logger once and return it."""
    global _configured
    logger = logging.getLogger("weekmenu")
    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level, logging.INFO))
        _configured = True
    return logger


__all__ = ["setup_logging"]
