# Path: data_exporter/output/strategies/csv_strategy.py
"""
CSV Strategy

Renders records as delimited text for spreadsheet import.

Nested mappings are flattened into dotted column names. Columns are
the union of keys across all records in order of first appearance;
records missing a column get the configured null value. Header names
are formatted and quoted the same way as values. Rows are joined with
'\\n' and carry no trailing newline.
"""

from collections.abc import Mapping
from typing import Any, Dict, List

from ...constants import (
    CSV_ROW_SEPARATOR,
    DATE_FORMAT_ISO,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_CSV_ESCAPE_QUOTES,
    DEFAULT_CSV_FLATTEN_OBJECTS,
    DEFAULT_CSV_INCLUDE_HEADERS,
    DEFAULT_CSV_NULL_VALUE,
    DEFAULT_CSV_QUOTE_STRINGS,
    DEFAULT_MAX_DEPTH,
    FORMAT_CSV,
)
from ...core.errors import ValidationError
from ...core.logger import get_process_logger
from ..flattener import flatten
from ..value_formatter import format_csv_row, format_csv_value, is_sequence


logger = get_process_logger('csv_strategy')


class CsvStrategy:
    """Exports records as CSV."""

    format_name = FORMAT_CSV

    def default_options(self) -> Dict[str, Any]:
        return {
            'delimiter': DEFAULT_CSV_DELIMITER,
            'include_headers': DEFAULT_CSV_INCLUDE_HEADERS,
            'quote_strings': DEFAULT_CSV_QUOTE_STRINGS,
            'escape_quotes': DEFAULT_CSV_ESCAPE_QUOTES,
            'date_format': DATE_FORMAT_ISO,
            'null_value': DEFAULT_CSV_NULL_VALUE,
            'flatten_objects': DEFAULT_CSV_FLATTEN_OBJECTS,
            'max_depth': DEFAULT_MAX_DEPTH,
        }

    def validate(self, data: Any) -> None:
        """
        Require a record or a sequence of records.

        Raises:
            ValidationError: For scalars and sequences holding non-records
        """
        if isinstance(data, Mapping):
            return
        if not is_sequence(data) or isinstance(data, (set, frozenset)):
            raise ValidationError(
                "CSV export requires a record or a sequence of records, "
                f"got {type(data).__name__}",
                format_id=FORMAT_CSV,
            )
        for index, item in enumerate(data):
            if not isinstance(item, Mapping):
                raise ValidationError(
                    f"CSV export requires records; item {index} is "
                    f"{type(item).__name__}",
                    format_id=FORMAT_CSV,
                )

    def transform(self, data: Any, config: Mapping) -> List[Mapping]:
        """Normalize to a list of records, flattened when requested."""
        records = list(data) if is_sequence(data) else [data]

        if config.get('flatten_objects'):
            max_depth = config.get('max_depth', DEFAULT_MAX_DEPTH)
            records = [flatten(record, '', max_depth) for record in records]
            logger.debug(
                f"Flattened {len(records)} records to depth {max_depth}"
            )

        return records

    def serialize(self, data: List[Mapping], config: Mapping) -> str:
        """Render header row and data rows."""
        if not data:
            return ''

        delimiter = config.get('delimiter', DEFAULT_CSV_DELIMITER)
        headers = self._collect_headers(data)
        rows = []

        if config.get('include_headers'):
            rows.append(format_csv_row(
                (format_csv_value(h, config) for h in headers), delimiter,
            ))

        for record in data:
            rows.append(format_csv_row(
                (format_csv_value(record.get(h), config) for h in headers),
                delimiter,
            ))

        return CSV_ROW_SEPARATOR.join(rows)

    def _collect_headers(self, records: List[Mapping]) -> List[str]:
        """Union of record keys in first-seen order."""
        headers: Dict[str, None] = {}
        for record in records:
            for key in record:
                headers.setdefault(key, None)
        return list(headers)


__all__ = ['CsvStrategy']
