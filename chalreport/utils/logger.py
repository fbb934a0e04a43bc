"""Centralized logging for chalreport

All diagnostics go to stderr so that ``--preview`` output on stdout
stays clean enough to pipe into another file.
"""

import logging
import sys
from typing import Optional

from .exceptions import ValidationError


LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _resolve_level(level: str) -> int:
    name = str(level).upper()
    if name not in LEVELS:
        raise ValidationError(
            f"Unknown log level '{level}' (expected one of: {', '.join(LEVELS)})"
        )
    return getattr(logging, name)


class Logger:
    """Process-wide ``chalreport`` logger with a single stderr handler"""

    _instance: Optional['Logger'] = None

    def __init__(self, level: str = "INFO"):
        self.logger = logging.getLogger("chalreport")
        self.logger.setLevel(_resolve_level(level))

        # Avoid adding multiple handlers
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(
                '[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            self.logger.addHandler(handler)

    @classmethod
    def get(cls, level: str = "INFO") -> logging.Logger:
        """Get or create logger instance"""
        if cls._instance is None:
            cls._instance = Logger(level)
        return cls._instance.logger

    @classmethod
    def set_level(cls, level: str):
        """Change log level, rejecting names logging does not know"""
        cls.get().setLevel(_resolve_level(level))


# Global logger instance
logger = Logger.get()
