# Path: data_exporter/core/errors.py
"""
Export Error Classes

Error taxonomy for the export pipeline.

Every error raised by the pipeline derives from ExportError, so
callers can catch the whole family at once. Each error carries a
human-readable message and, when known, the format it relates to.

Hierarchy:
    ExportError
        ValidationError         - bad input shape or nullness
        SerializationError      - format-specific encode failure
        UnsupportedFormatError  - unknown format identifier
        ConfigurationError      - malformed strategy registration
        PersistenceError        - storage write failure
"""

from typing import Optional


class ExportError(Exception):
    """
    Base class for all export failures.

    Attributes:
        message: Human-readable description
        format_id: Format being exported when the error occurred
    """

    def __init__(self, message: str, format_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.format_id = format_id

    def __str__(self) -> str:
        if self.format_id:
            return f"[{self.format_id}] {self.message}"
        return self.message


class ValidationError(ExportError):
    """Dataset is missing or has the wrong shape for the format."""


class SerializationError(ExportError):
    """Content could not be generated for the target format."""


class UnsupportedFormatError(ExportError):
    """No strategy is registered for the requested format."""


class ConfigurationError(ExportError):
    """A strategy registration does not meet the strategy contract."""


class PersistenceError(ExportError):
    """
    Writing exported content to storage failed.

    Attributes:
        path: Target path of the failed write
    """

    def __init__(
        self,
        message: str,
        path=None,
        format_id: Optional[str] = None,
    ):
        super().__init__(message, format_id=format_id)
        self.path = path


__all__ = [
    'ExportError',
    'ValidationError',
    'SerializationError',
    'UnsupportedFormatError',
    'ConfigurationError',
    'PersistenceError',
]
