"""
repositories/logger_repo.py
----------------------------
Diagnostic sink handed to callers that want to leave a trace message.
"""

import logging

from utils.logger import get_logger


class LoggerRepository:
    """Writes messages to the project log. Never fails."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or get_logger(__name__)

    def log(self, message: str) -> None:
        """Write ``message`` as a single INFO line."""
        self.logger.info(message)
