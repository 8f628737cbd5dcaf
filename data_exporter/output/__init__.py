# Path: data_exporter/output/__init__.py
"""
Output Module for data_exporter

Turns in-memory records into JSON, CSV or custom formats and returns
the text or writes it to a file.

Architecture:
    DataExporter      - Main entry point for exports
    StrategyRegistry  - Register new output formats
    run_export        - Fixed validate/transform/serialize/persist pipeline
    flatten           - Dotted-path flattening of nested records
    format_csv_value  - CSV cell formatting and escaping

Export flow:
    dataset -> DataExporter -> StrategyRegistry -> strategy -> text or file

Extensibility:
    - New output formats: write a class with default_options, validate,
      transform and serialize, then register it

Usage:
    from data_exporter.output import DataExporter

    exporter = DataExporter(output_dir=None)
    print(exporter.to_csv(records))
"""

from .export_config import merge_config
from .export_models import DatasetStats, ExportFailure
from .flattener import flatten
from .value_formatter import format_csv_value, format_csv_row
from .strategies import (
    ExportStrategy,
    JsonStrategy,
    CsvStrategy,
    check_dataset,
    conforms_to_strategy,
    run_export,
)
from .strategy_registry import StrategyRegistry
from .exporter import DataExporter


__all__ = [
    # Config and models
    'merge_config',
    'DatasetStats',
    'ExportFailure',
    # Helpers
    'flatten',
    'format_csv_value',
    'format_csv_row',
    # Strategies
    'ExportStrategy',
    'JsonStrategy',
    'CsvStrategy',
    'check_dataset',
    'conforms_to_strategy',
    'run_export',
    # Registry and facade
    'StrategyRegistry',
    'DataExporter',
]
