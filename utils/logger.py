"""
utils/logger.py
---------------
Logging setup for the game-tracker data access layer.
Repositories and the storage driver call `get_logger(__name__)`; the first
call installs one stdout handler on the root logger at `config.LOG_LEVEL`.
"""

import logging
import sys

from config import LOG_LEVEL

_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
_configured = False


def _configure_root(level_name: str) -> None:
    global _configured
    if _configured:
        return
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    root = logging.getLogger()
    level = logging.getLevelName(level_name)
    # unknown names such as "VERBOSE" fall back to INFO
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    root.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually the caller's ``__name__``)."""
    _configure_root(LOG_LEVEL)
    return logging.getLogger(name)
