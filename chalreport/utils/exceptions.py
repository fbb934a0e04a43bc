"""Custom exceptions for chalreport"""


class ChalreportError(Exception):
    """Base exception for all chalreport errors"""
    pass


class ValidationError(ChalreportError):
    """Report configuration is invalid"""
    pass


class RecordError(ChalreportError):
    """A scanned entry could not be turned into a report row"""

    def __init__(self, path, message: str):
        self.path = path
        super().__init__(f"{path}: {message}")


class RecordNotFoundError(RecordError):
    """Challenge or tested file is missing from the entry"""
    pass


class RecordParseError(RecordError):
    """Challenge or tested file does not have the required shape"""
    pass


class ReportWriteError(ChalreportError):
    """Output file could not be created or written"""
    pass
