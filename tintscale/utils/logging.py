"""
Tintscale Structured Logging
Centralized logging configuration using loguru.
"""
import sys
from typing import Dict, Any, Optional

from loguru import logger

from tintscale.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


class StructuredLogger:
    """Structured logger for the Tintscale color service."""

    def __init__(self, level: Optional[str] = None, serialize: Optional[bool] = None):
        self.level = level or config.LOG_LEVEL
        self.serialize = config.LOG_JSON if serialize is None else serialize
        self._configure_logger()

    def _configure_logger(self):
        """Replace loguru's default handler with a single stdout sink."""
        logger.remove()
        logger.add(
            sys.stdout,
            format=LOG_FORMAT,
            level=self.level,
            serialize=self.serialize
        )

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        bound = logger.bind(**extra) if extra else logger
        # depth=2 attributes the record to the caller of info()/warning()/...
        bound.opt(depth=2).log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with optional extra fields."""
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
