# Path: data_exporter/output/value_formatter.py
"""
Value Formatter

Converts single values into their CSV text form.

Rules:
    None / missing   -> configured null_value
    date / datetime  -> ISO-8601 when date_format is 'iso', else str()
    list / tuple     -> elements joined with '; ', always quoted
    mapping          -> compact JSON, always quoted
    bool             -> 'true' / 'false'
    anything else    -> str(), quotes doubled and the whole value
                        quoted when it holds the delimiter, a quote
                        or a line break
"""

import json
from collections.abc import Mapping
from datetime import date
from typing import Any, Iterable

from ..constants import (
    CSV_ESCAPED_QUOTE,
    CSV_QUOTE,
    DATE_FORMAT_ISO,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_CSV_NULL_VALUE,
    JSON_COMPACT_SEPARATORS,
    SEQUENCE_JOINER,
)

SEQUENCE_TYPES = (list, tuple, set, frozenset)


def is_sequence(value: Any) -> bool:
    """True for list-like values; strings and bytes are scalars."""
    return isinstance(value, SEQUENCE_TYPES)


def format_date(value: date, date_format: str = DATE_FORMAT_ISO) -> str:
    """Render a date or datetime."""
    if date_format == DATE_FORMAT_ISO:
        return value.isoformat()
    return str(value)


def format_csv_value(value: Any, config: Mapping) -> str:
    """
    Format a value for one CSV cell.

    Args:
        value: Cell value
        config: Merged export configuration; reads null_value,
            date_format, delimiter, quote_strings and escape_quotes

    Returns:
        Cell text
    """
    if value is None:
        return config.get('null_value', DEFAULT_CSV_NULL_VALUE)

    if isinstance(value, date):
        return format_date(value, config.get('date_format', DATE_FORMAT_ISO))

    if is_sequence(value):
        joined = SEQUENCE_JOINER.join(_element_text(v, config) for v in value)
        return f'{CSV_QUOTE}{joined}{CSV_QUOTE}'

    if isinstance(value, Mapping):
        encoded = json.dumps(
            value, separators=JSON_COMPACT_SEPARATORS, default=str,
        )
        return f'{CSV_QUOTE}{encoded}{CSV_QUOTE}'

    if isinstance(value, bool):
        text = 'true' if value else 'false'
    else:
        text = str(value)

    if config.get('escape_quotes') and CSV_QUOTE in text:
        text = text.replace(CSV_QUOTE, CSV_ESCAPED_QUOTE)

    delimiter = config.get('delimiter', DEFAULT_CSV_DELIMITER)
    if config.get('quote_strings') and _needs_quoting(text, delimiter):
        text = f'{CSV_QUOTE}{text}{CSV_QUOTE}'

    return text


def format_csv_row(values: Iterable[str], delimiter: str) -> str:
    """Join already-formatted cells into one row."""
    return delimiter.join(values)


def _element_text(value: Any, config: Mapping) -> str:
    """Text for one element of a sequence cell."""
    if value is None:
        return ''
    if isinstance(value, date):
        return format_date(value, config.get('date_format', DATE_FORMAT_ISO))
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, Mapping):
        return json.dumps(value, separators=JSON_COMPACT_SEPARATORS, default=str)
    return str(value)


def _needs_quoting(text: str, delimiter: str) -> bool:
    return (
        (delimiter and delimiter in text)
        or CSV_QUOTE in text
        or '\n' in text
        or '\r' in text
    )


__all__ = [
    'SEQUENCE_TYPES',
    'is_sequence',
    'format_date',
    'format_csv_value',
    'format_csv_row',
]
