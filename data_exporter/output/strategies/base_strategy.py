# Path: data_exporter/output/strategies/base_strategy.py
"""
Export Strategy Contract and Pipeline

Defines the capability set every export strategy provides, and the
pipeline function that drives a strategy through one export.

A strategy is any class whose instances provide:
    default_options()          -> dict of format-specific defaults
    validate(data)             -> None, raises on unusable data
    transform(data, config)    -> format-ready intermediate shape
    serialize(data, config)    -> text content

No base class is required. The registry checks the capability set
structurally when a strategy class is registered.

To add a new format (e.g., XML, YAML):
1. Write a class with the four methods above
2. Register it via StrategyRegistry.register() or
   DataExporter.register_strategy()
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

from ...core.errors import (
    ExportError,
    PersistenceError,
    SerializationError,
    ValidationError,
)
from ...core.file_writer import write_file
from ...core.logger import get_process_logger


logger = get_process_logger('pipeline')

REQUIRED_CAPABILITIES = ('default_options', 'validate', 'transform', 'serialize')

ExportResult = Union[str, Path]
Writer = Callable[[Path, str, str], Path]


@runtime_checkable
class ExportStrategy(Protocol):
    """Structural type for export strategies."""

    def default_options(self) -> dict[str, Any]:
        """Format-specific option defaults."""

    def validate(self, data: Any) -> None:
        """Raise if data cannot be exported in this format."""

    def transform(self, data: Any, config: Mapping) -> Any:
        """Build the format-ready intermediate shape."""

    def serialize(self, data: Any, config: Mapping) -> str:
        """Render the intermediate shape as text."""


def conforms_to_strategy(candidate: Any) -> bool:
    """
    Check that candidate is a class providing the strategy capabilities.

    Args:
        candidate: Object offered for registration

    Returns:
        True if candidate is a class with every required method
    """
    if not isinstance(candidate, type):
        return False
    return all(
        callable(getattr(candidate, name, None))
        for name in REQUIRED_CAPABILITIES
    )


def check_dataset(
    strategy: ExportStrategy,
    data: Any,
    format_id: Optional[str] = None,
) -> None:
    """
    Run the validation step only.

    Args:
        strategy: Strategy instance for the target format
        data: Dataset to check
        format_id: Format name used in error messages

    Raises:
        ValidationError: If data is None or rejected by the strategy
            (any other exception from validate() is wrapped as one)
        SerializationError: If the strategy finds data unencodable
    """
    if data is None:
        raise ValidationError("Data cannot be None", format_id=format_id)

    try:
        strategy.validate(data)
    except ExportError as e:
        if e.format_id is None:
            e.format_id = format_id
        raise
    except Exception as e:
        raise ValidationError(str(e), format_id=format_id) from e


def run_export(
    strategy: ExportStrategy,
    data: Any,
    config: Mapping,
    writer: Writer = write_file,
    format_id: Optional[str] = None,
) -> ExportResult:
    """
    Run one export: validate, transform, serialize, then persist or return.

    Args:
        strategy: Strategy instance for the target format
        data: Record or sequence of records
        config: Merged, read-only export configuration
        writer: Persistence collaborator used when output_path is set
        format_id: Format name used in error messages and logs

    Returns:
        Path of the written file when config has output_path,
        otherwise the content string

    Raises:
        ValidationError: Missing data or data the format cannot take
        SerializationError: Content generation failed
            (any non-ExportError raised by transform or serialize)
        PersistenceError: Writing the file failed
    """
    label = format_id or type(strategy).__name__

    check_dataset(strategy, data, format_id)

    try:
        transformed = strategy.transform(data, config)
        content = strategy.serialize(transformed, config)
    except ExportError as e:
        if e.format_id is None:
            e.format_id = format_id
        raise
    except Exception as e:
        raise SerializationError(
            f"{label} serialization failed: {e}", format_id=format_id,
        ) from e

    if not isinstance(content, str):
        raise SerializationError(
            f"{label} strategy produced {type(content).__name__}, expected str",
            format_id=format_id,
        )

    output_path = config.get('output_path')
    if output_path:
        try:
            written = writer(Path(output_path), content, config.get('encoding'))
        except ExportError as e:
            if e.format_id is None:
                e.format_id = format_id
            raise
        except OSError as e:
            raise PersistenceError(
                f"Failed to save file {output_path}: {e}",
                path=Path(output_path), format_id=format_id,
            ) from e
        logger.info(f"Exported {label} to {written}")
        return written

    logger.debug(f"Exported {label} in memory ({len(content)} characters)")
    return content


__all__ = [
    'REQUIRED_CAPABILITIES',
    'ExportResult',
    'ExportStrategy',
    'conforms_to_strategy',
    'check_dataset',
    'run_export',
]
