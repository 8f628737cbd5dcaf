# Path: data_exporter/__init__.py
"""
data_exporter

Exports in-memory records to JSON, CSV and user-defined formats,
returning the text or writing it to a file.

Usage:
    from data_exporter import DataExporter

    exporter = DataExporter(output_dir='./exports')
    path = exporter.to_csv(records, filename='people.csv')
"""

from .constants import EXPORTER_VERSION
from .core.errors import (
    ExportError,
    ValidationError,
    SerializationError,
    UnsupportedFormatError,
    ConfigurationError,
    PersistenceError,
)
from .output import (
    DataExporter,
    StrategyRegistry,
    JsonStrategy,
    CsvStrategy,
    flatten,
)

__version__ = EXPORTER_VERSION

__all__ = [
    'DataExporter',
    'StrategyRegistry',
    'JsonStrategy',
    'CsvStrategy',
    'flatten',
    'ExportError',
    'ValidationError',
    'SerializationError',
    'UnsupportedFormatError',
    'ConfigurationError',
    'PersistenceError',
]
