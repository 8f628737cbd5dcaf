# Path: data_exporter/output/strategies/__init__.py
"""
Export Strategies

Each strategy turns a dataset into one output format. Strategies are
format-specific; the shared pipeline in base_strategy drives them
through validate -> transform -> serialize -> persist-or-return.
New formats add new strategy classes without changing the pipeline.
"""

from .base_strategy import (
    REQUIRED_CAPABILITIES,
    ExportResult,
    ExportStrategy,
    check_dataset,
    conforms_to_strategy,
    run_export,
)
from .json_strategy import JsonStrategy
from .csv_strategy import CsvStrategy

__all__ = [
    'REQUIRED_CAPABILITIES',
    'ExportResult',
    'ExportStrategy',
    'conforms_to_strategy',
    'check_dataset',
    'run_export',
    'JsonStrategy',
    'CsvStrategy',
]
