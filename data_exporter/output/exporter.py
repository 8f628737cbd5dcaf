# Path: data_exporter/output/exporter.py
"""
Data Exporter

Main entry point for exports. Merges options, resolves output paths,
picks the strategy for the requested format and runs the export
pipeline.

Architecture:
    dataset  ->  DataExporter  ->  StrategyRegistry  ->  strategy
             ->  validate -> transform -> serialize -> file or string

Options are merged in increasing precedence:
    strategy defaults -> exporter defaults -> call options

When a call gives no output_path but an output_dir is configured
(the default is ./exports), a path is generated as
output_dir/filename, or output_dir/export[-<timestamp>].<format>.
Pass output_dir=None to get content back as a string instead.

Usage:
    from data_exporter import DataExporter

    exporter = DataExporter(output_dir='./exports')
    path = exporter.export(records, 'csv', filename='people.csv')
    text = exporter.to_json(records, output_dir=None)
    results = exporter.export_many(records, ['json', 'csv'])
"""

import json
from collections.abc import Mapping
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Type

from ..config_loader import ConfigLoader
from ..constants import (
    DEFAULT_FILENAME_BASE,
    FORMAT_CSV,
    FORMAT_JSON,
    JSON_COMPACT_SEPARATORS,
    TIMESTAMP_REPLACEMENT,
    TIMESTAMP_UNSAFE_CHARS,
)
from ..core.errors import ConfigurationError, ExportError
from ..core.file_writer import write_file
from ..core.logger import get_output_logger
from .export_config import merge_config
from .export_models import DatasetStats, ExportFailure
from .strategies import ExportResult, check_dataset, run_export
from .strategy_registry import StrategyRegistry
from .value_formatter import is_sequence


class DataExporter:
    """
    Facade over the strategy registry and export pipeline.

    Example:
        exporter = DataExporter(output_dir=None)
        csv_text = exporter.export([{'id': 1, 'name': 'A'}], 'csv')
        # 'id,name\\n1,A'
    """

    def __init__(
        self,
        config: Optional[ConfigLoader] = None,
        registry: Optional[StrategyRegistry] = None,
        writer=write_file,
        **defaults: Any,
    ):
        """
        Initialize exporter.

        Args:
            config: ConfigLoader instance (creates one if not provided)
            registry: StrategyRegistry (creates one if not provided)
            writer: Persistence collaborator, write_file(path, content, encoding)
            **defaults: Exporter-level default options, overriding
                the ones read from configuration
        """
        self.config = config or ConfigLoader()
        self.registry = registry or StrategyRegistry()
        self.writer = writer
        self.default_options: Dict[str, Any] = {
            **self.config.exporter_defaults(),
            **defaults,
        }
        self.logger = get_output_logger('exporter')

    # ------------------------------------------------------------------
    # Export operations
    # ------------------------------------------------------------------

    def export(self, data: Any, format_id: str, **options: Any) -> ExportResult:
        """
        Export data to one format.

        Args:
            data: Record or sequence of records
            format_id: Registered format identifier (case-insensitive)
            **options: Per-call options

        Returns:
            Path of the written file, or the content string when no
            output path applies

        Raises:
            UnsupportedFormatError: Unknown format
            ValidationError: Data missing or the wrong shape
            SerializationError: Content generation failed
            PersistenceError: File write failed
        """
        strategy = self.registry.create(format_id)

        config = merge_config(
            self._strategy_defaults(strategy, format_id),
            self.default_options,
            options,
        )
        if not config.get('output_path') and config.get('output_dir'):
            output_path = self.generate_output_path(format_id, config)
            config = merge_config(config, {'output_path': output_path})

        self.logger.debug(
            f"Exporting {self._count_records(data)} records as {format_id}"
        )
        return run_export(
            strategy, data, config, writer=self.writer, format_id=format_id,
        )

    def to_json(self, data: Any, **options: Any) -> ExportResult:
        """Export data as JSON."""
        return self.export(data, FORMAT_JSON, **options)

    def to_csv(self, data: Any, **options: Any) -> ExportResult:
        """Export data as CSV."""
        return self.export(data, FORMAT_CSV, **options)

    def export_many(
        self,
        data: Any,
        format_ids: Sequence[str],
        **options: Any,
    ) -> Dict[str, Any]:
        """
        Export the same data to several formats.

        Each format runs independently; a failure in one is recorded
        and the remaining formats still run. Options keyed by a
        requested format name (e.g. csv={'delimiter': ';'}) apply to
        that format only.

        Args:
            data: Record or sequence of records
            format_ids: Formats to export
            **options: Shared options plus per-format override mappings

        Returns:
            Dict mapping each format to its result (path or content),
            or to {'error': message, 'error_type': class name}
        """
        requested = {self._format_key(f) for f in format_ids}
        overrides = {
            self._format_key(key): value for key, value in options.items()
            if self._format_key(key) in requested and isinstance(value, Mapping)
        }
        shared = {
            key: value for key, value in options.items()
            if self._format_key(key) not in overrides
        }

        results: Dict[str, Any] = {}
        for format_id in format_ids:
            format_options = {
                **shared, **overrides.get(self._format_key(format_id), {}),
            }

            try:
                results[format_id] = self.export(data, format_id, **format_options)
            except ExportError as e:
                self.logger.warning(f"Export to {format_id} failed: {e}")
                results[format_id] = ExportFailure(
                    error=e.message, error_type=type(e).__name__,
                ).to_dict()
            except Exception as e:
                self.logger.exception(f"Unexpected error exporting {format_id}")
                results[format_id] = ExportFailure(
                    error=str(e), error_type=type(e).__name__,
                ).to_dict()

        return results

    # ------------------------------------------------------------------
    # Auxiliary operations
    # ------------------------------------------------------------------

    def register_strategy(self, format_id: str, strategy_class: Type[Any]) -> 'DataExporter':
        """Register a custom strategy class for a format."""
        self.registry.register(format_id, strategy_class)
        self.logger.info(f"Registered strategy for format: {format_id}")
        return self

    def list_supported_formats(self) -> List[str]:
        """Return all registered format identifiers."""
        return self.registry.list_formats()

    def validate(self, data: Any, format_id: str) -> bool:
        """
        Run only the validation step of a format.

        Returns:
            True when data is acceptable

        Raises:
            UnsupportedFormatError, ValidationError, SerializationError
        """
        strategy = self.registry.create(format_id)
        check_dataset(strategy, data, format_id)
        return True

    def describe_dataset(self, data: Any) -> DatasetStats:
        """
        Summarize the shape of a dataset.

        Args:
            data: Any dataset

        Returns:
            DatasetStats for display or logging
        """
        return DatasetStats(
            is_sequence=is_sequence(data),
            record_count=self._count_records(data),
            data_type=self._type_tag(data),
            has_nested_objects=self._has_nested_objects(data),
            estimated_size=self._estimate_size(data),
        )

    # ------------------------------------------------------------------
    # Path generation
    # ------------------------------------------------------------------

    def generate_output_path(self, format_id: str, config: Mapping) -> Path:
        """
        Build an output path from output_dir, filename and timestamp.

        Args:
            format_id: Format used as the default file extension
            config: Merged options

        Returns:
            Absolute path for the export file
        """
        filename = config.get('filename')
        if not filename:
            extension = format_id.lower()
            if config.get('create_timestamp'):
                filename = (
                    f"{DEFAULT_FILENAME_BASE}-{self._filename_timestamp()}"
                    f".{extension}"
                )
            else:
                filename = f"{DEFAULT_FILENAME_BASE}.{extension}"

        return (Path(config['output_dir']) / filename).resolve()

    @staticmethod
    def _filename_timestamp() -> str:
        """UTC ISO-8601 timestamp with ':' and '.' replaced."""
        stamp = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
        stamp = stamp.replace('+00:00', 'Z')
        for char in TIMESTAMP_UNSAFE_CHARS:
            stamp = stamp.replace(char, TIMESTAMP_REPLACEMENT)
        return stamp

    @staticmethod
    def _format_key(format_id: Any) -> str:
        return str(format_id).strip().lower()

    @staticmethod
    def _strategy_defaults(strategy: Any, format_id: str) -> Mapping:
        """
        Read a strategy's default options.

        Raises:
            ConfigurationError: If default_options() fails or does not
                return a mapping
        """
        try:
            defaults = strategy.default_options()
        except ExportError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"default_options() failed: {e}", format_id=format_id,
            ) from e

        if defaults is None:
            return {}
        if not isinstance(defaults, Mapping):
            raise ConfigurationError(
                f"default_options() must return a mapping, "
                f"got {type(defaults).__name__}",
                format_id=format_id,
            )
        return defaults

    # ------------------------------------------------------------------
    # Dataset introspection
    # ------------------------------------------------------------------

    @staticmethod
    def _count_records(data: Any) -> int:
        return len(data) if is_sequence(data) else 1

    @staticmethod
    def _type_tag(data: Any) -> str:
        if data is None:
            return 'null'
        if is_sequence(data):
            return 'array'
        if isinstance(data, Mapping):
            return 'object'
        if isinstance(data, bool):
            return 'boolean'
        if isinstance(data, (int, float)):
            return 'number'
        if isinstance(data, str):
            return 'string'
        if isinstance(data, date):
            return 'date'
        return type(data).__name__

    @staticmethod
    def _has_nested_objects(data: Any) -> bool:
        if is_sequence(data):
            values = data
        elif isinstance(data, Mapping):
            values = data.values()
        else:
            return False
        return any(isinstance(v, Mapping) or is_sequence(v) for v in values)

    def _estimate_size(self, data: Any) -> Optional[int]:
        try:
            return len(json.dumps(
                data, separators=JSON_COMPACT_SEPARATORS, default=str,
            ))
        except (ValueError, RecursionError) as e:
            self.logger.warning(f"Cannot estimate dataset size: {e}")
            return None


__all__ = ['DataExporter']
