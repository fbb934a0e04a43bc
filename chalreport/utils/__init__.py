"""Utilities for chalreport"""

from .exceptions import (
    ChalreportError,
    ValidationError,
    RecordError,
    RecordNotFoundError,
    RecordParseError,
    ReportWriteError,
)
from .logger import Logger
from .config import Config

__all__ = [
    "ChalreportError",
    "ValidationError",
    "RecordError",
    "RecordNotFoundError",
    "RecordParseError",
    "ReportWriteError",
    "Logger",
    "Config",
]
