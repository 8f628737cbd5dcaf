# Path: data_exporter/core/logger/__init__.py
"""
data_exporter Logger Package

IPO-aware logging for the export pipeline.

Provides separate log streams for:
- INPUT layer (CLI, dataset loading)
- PROCESS layer (validation, transformation)
- OUTPUT layer (serialization, file writes)
"""

from .ipo_logging import (
    IPOFilter,
    setup_ipo_logging,
    get_input_logger,
    get_process_logger,
    get_output_logger,
)

__all__ = [
    'IPOFilter',
    'setup_ipo_logging',
    'get_input_logger',
    'get_process_logger',
    'get_output_logger',
]
