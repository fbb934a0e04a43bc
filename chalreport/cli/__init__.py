"""Command line interface for chalreport"""

from .main import main

__all__ = ["main"]
