"""
utils/logger.py
---------------
Centralized logging configuration.
Every data-access module obtains its logger through `get_logger(__name__)`
so the whole project writes one format to stdout at the configured level.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_initialized = False


def _init_logging(level: str = LOG_LEVEL) -> None:
    """Attach the stdout handler to the root logger once."""
    global _initialized
    if _initialized:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.INFO))
    root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger writing through the shared stdout handler.
    """
    _init_logging()
    return logging.getLogger(name)
