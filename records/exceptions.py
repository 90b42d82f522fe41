"""
Custom exceptions for record stores and the programs built on them.
"""

from pathlib import Path
from typing import Optional


class RecordsError(Exception):
    """Base class for all record-keeping errors."""
    pass


class DuplicateKeyError(RecordsError):
    """An item with the same id is already stored."""

    def __init__(self, key: int, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Item with ID {key} already exists.")


class NotFoundError(RecordsError, LookupError):
    """No item is stored under the requested id."""

    def __init__(self, key: int, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Item with ID {key} not found.")


class InvalidValueError(RecordsError, ValueError):
    """Value outside the allowed domain (e.g. a negative quantity)."""
    pass


class IOFailureError(RecordsError):
    """Reading or writing a record file failed."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class ParseFailureError(RecordsError, ValueError):
    """Persisted or input data could not be parsed."""
    pass


class MissingFieldError(ParseFailureError):
    """A student record line does not have exactly three fields."""
    pass


class InvalidIdFormatError(ParseFailureError):
    """A student id is not an integer."""
    pass


class InvalidScoreFormatError(ParseFailureError):
    """A student score is not an integer."""
    pass
