# Path: data_exporter/output/export_models.py
"""
Export Data Models

Format-agnostic data structures describing datasets and export results.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class DatasetStats:
    """
    Shape summary of a dataset.

    Attributes:
        is_sequence: True when the dataset is a list of records
        record_count: Number of records (1 for a single record)
        data_type: JSON-style type tag ('array', 'object', 'string', ...)
        has_nested_objects: True if any top-level value is a mapping
            or sequence
        estimated_size: Length of the compact JSON encoding, or None
            when the dataset cannot be encoded
    """
    is_sequence: bool
    record_count: int
    data_type: str
    has_nested_objects: bool
    estimated_size: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain dict for display."""
        return asdict(self)


@dataclass
class ExportFailure:
    """
    Error descriptor for one failed format in a multi-format export.

    Attributes:
        error: Human-readable message
        error_type: Exception class name
    """
    error: str
    error_type: str

    def to_dict(self) -> Dict[str, str]:
        """Convert to plain dict."""
        return asdict(self)


__all__ = ['DatasetStats', 'ExportFailure']
