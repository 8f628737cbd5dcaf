# Path: data_exporter/core/__init__.py
"""
data_exporter Core Package

Core utilities for the export pipeline.

Submodules:
    - errors: Export error taxonomy
    - logger: IPO-aware logging system
    - file_writer: Persistence collaborator
"""

from .errors import (
    ExportError,
    ValidationError,
    SerializationError,
    UnsupportedFormatError,
    ConfigurationError,
    PersistenceError,
)
from .file_writer import write_file

__all__ = [
    'ExportError',
    'ValidationError',
    'SerializationError',
    'UnsupportedFormatError',
    'ConfigurationError',
    'PersistenceError',
    'write_file',
]
