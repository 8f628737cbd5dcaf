# Path: data_exporter/constants.py
"""
System-Wide Constants for data_exporter

Central repository for constant values used across the exporter.
Module code reads defaults and identifiers from here.

Constants are organized by category:
- Exporter Identity
- Format Identifiers
- Option Defaults
- Value Formatting
- Display Formatting
"""

from enum import Enum
from typing import Final


# ==============================================================================
# EXPORTER IDENTITY
# ==============================================================================

EXPORTER_NAME: Final[str] = 'DataExporter'
EXPORTER_VERSION: Final[str] = '1.0.0'
EXPORTER_ID: Final[str] = f'{EXPORTER_NAME} v{EXPORTER_VERSION}'


# ==============================================================================
# FORMAT IDENTIFIERS
# ==============================================================================

class ExportFormat(str, Enum):
    """Built-in export formats."""
    JSON = 'json'
    CSV = 'csv'


FORMAT_JSON: Final[str] = ExportFormat.JSON.value
FORMAT_CSV: Final[str] = ExportFormat.CSV.value


# ==============================================================================
# OPTION DEFAULTS
# ==============================================================================

# Global
DEFAULT_ENCODING: Final[str] = 'utf-8'
DEFAULT_OUTPUT_DIR: Final[str] = './exports'
DEFAULT_CREATE_TIMESTAMP: Final[bool] = True
DEFAULT_FILENAME_BASE: Final[str] = 'export'

# Date handling
DATE_FORMAT_ISO: Final[str] = 'iso'

# JSON
DEFAULT_JSON_PRETTIFY: Final[bool] = True
DEFAULT_JSON_INCLUDE_METADATA: Final[bool] = True
JSON_INDENT: Final[int] = 2
JSON_COMPACT_SEPARATORS: Final[tuple] = (',', ':')

# CSV
DEFAULT_CSV_DELIMITER: Final[str] = ','
DEFAULT_CSV_INCLUDE_HEADERS: Final[bool] = True
DEFAULT_CSV_QUOTE_STRINGS: Final[bool] = True
DEFAULT_CSV_ESCAPE_QUOTES: Final[bool] = True
DEFAULT_CSV_NULL_VALUE: Final[str] = ''
DEFAULT_CSV_FLATTEN_OBJECTS: Final[bool] = True
DEFAULT_MAX_DEPTH: Final[int] = 3


# ==============================================================================
# VALUE FORMATTING
# ==============================================================================

CSV_QUOTE: Final[str] = '"'
CSV_ESCAPED_QUOTE: Final[str] = '""'
CSV_ROW_SEPARATOR: Final[str] = '\n'
SEQUENCE_JOINER: Final[str] = '; '
KEY_PATH_SEPARATOR: Final[str] = '.'

# Characters replaced in filename timestamps
TIMESTAMP_UNSAFE_CHARS: Final[str] = ':.'
TIMESTAMP_REPLACEMENT: Final[str] = '-'


# ==============================================================================
# DISPLAY FORMATTING
# ==============================================================================

MENU_WIDTH: Final[int] = 60
MENU_SEPARATOR: Final[str] = '-' * MENU_WIDTH
MENU_HEADER: Final[str] = '=' * MENU_WIDTH

# Status indicators (ASCII only - no emojis)
STATUS_OK: Final[str] = '[OK]'
STATUS_FAIL: Final[str] = '[FAIL]'
STATUS_INFO: Final[str] = '[INFO]'


__all__ = [
    # Identity
    'EXPORTER_NAME',
    'EXPORTER_VERSION',
    'EXPORTER_ID',
    # Formats
    'ExportFormat',
    'FORMAT_JSON',
    'FORMAT_CSV',
    # Defaults
    'DEFAULT_ENCODING',
    'DEFAULT_OUTPUT_DIR',
    'DEFAULT_CREATE_TIMESTAMP',
    'DEFAULT_FILENAME_BASE',
    'DATE_FORMAT_ISO',
    'DEFAULT_JSON_PRETTIFY',
    'DEFAULT_JSON_INCLUDE_METADATA',
    'JSON_INDENT',
    'JSON_COMPACT_SEPARATORS',
    'DEFAULT_CSV_DELIMITER',
    'DEFAULT_CSV_INCLUDE_HEADERS',
    'DEFAULT_CSV_QUOTE_STRINGS',
    'DEFAULT_CSV_ESCAPE_QUOTES',
    'DEFAULT_CSV_NULL_VALUE',
    'DEFAULT_CSV_FLATTEN_OBJECTS',
    'DEFAULT_MAX_DEPTH',
    # Value formatting
    'CSV_QUOTE',
    'CSV_ESCAPED_QUOTE',
    'CSV_ROW_SEPARATOR',
    'SEQUENCE_JOINER',
    'KEY_PATH_SEPARATOR',
    'TIMESTAMP_UNSAFE_CHARS',
    'TIMESTAMP_REPLACEMENT',
    # Display
    'MENU_WIDTH',
    'MENU_SEPARATOR',
    'MENU_HEADER',
    'STATUS_OK',
    'STATUS_FAIL',
    'STATUS_INFO',
]
