# Path: data_exporter/output/strategies/json_strategy.py
"""
JSON Strategy

Renders datasets as JSON text, optionally wrapped with export metadata.

Sequence datasets get an envelope:
    {"metadata": {...}, "data": [...]}
A single record gets the metadata as a sibling "metadata" key,
replacing any existing key of that name.
"""

import json
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, Callable, Dict

from ...constants import (
    DATE_FORMAT_ISO,
    DEFAULT_JSON_INCLUDE_METADATA,
    DEFAULT_JSON_PRETTIFY,
    EXPORTER_ID,
    FORMAT_JSON,
    JSON_COMPACT_SEPARATORS,
    JSON_INDENT,
)
from ...core.errors import SerializationError
from ..value_formatter import format_date, is_sequence


def _default_encoder(date_format: str) -> Callable[[Any], Any]:
    """Build a json.dumps default hook for non-native values."""

    def encode(obj: Any) -> Any:
        if isinstance(obj, date):
            return format_date(obj, date_format)
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        raise TypeError(
            f"Object of type {type(obj).__name__} is not JSON serializable"
        )

    return encode


class JsonStrategy:
    """Exports datasets as JSON."""

    format_name = FORMAT_JSON

    def default_options(self) -> Dict[str, Any]:
        return {
            'prettify': DEFAULT_JSON_PRETTIFY,
            'include_metadata': DEFAULT_JSON_INCLUDE_METADATA,
            'date_format': DATE_FORMAT_ISO,
        }

    def validate(self, data: Any) -> None:
        """
        Check that data encodes as JSON.

        Raises:
            SerializationError: On circular references, unsupported
                value types, or non-finite floats
        """
        try:
            json.dumps(data, default=_default_encoder(DATE_FORMAT_ISO),
                       allow_nan=False)
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(
                f"Data is not JSON serializable: {e}", format_id=FORMAT_JSON,
            ) from e

    def transform(self, data: Any, config: Mapping) -> Any:
        """Copy the dataset and attach metadata when requested."""
        if is_sequence(data):
            transformed: Any = list(data)
        elif isinstance(data, Mapping):
            transformed = dict(data)
        else:
            transformed = data

        if not config.get('include_metadata'):
            return transformed

        metadata = self._build_metadata(data)
        if isinstance(transformed, dict):
            transformed['metadata'] = metadata
            return transformed
        return {'metadata': metadata, 'data': transformed}

    def serialize(self, data: Any, config: Mapping) -> str:
        """Encode to JSON text, indented when prettify is set."""
        encoder = _default_encoder(config.get('date_format', DATE_FORMAT_ISO))
        try:
            if config.get('prettify'):
                return json.dumps(
                    data, indent=JSON_INDENT, default=encoder, allow_nan=False,
                )
            return json.dumps(
                data, separators=JSON_COMPACT_SEPARATORS, default=encoder,
                allow_nan=False,
            )
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(
                f"JSON serialization failed: {e}", format_id=FORMAT_JSON,
            ) from e

    def _build_metadata(self, data: Any) -> Dict[str, Any]:
        exported_at = datetime.now(timezone.utc).isoformat(timespec='milliseconds')
        return {
            'exportedAt': exported_at.replace('+00:00', 'Z'),
            'format': FORMAT_JSON,
            'recordCount': len(data) if is_sequence(data) else 1,
            'exporter': EXPORTER_ID,
        }


__all__ = ['JsonStrategy']
