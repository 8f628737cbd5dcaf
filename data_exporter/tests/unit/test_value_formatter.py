# Path: data_exporter/tests/unit/test_value_formatter.py
"""
Unit Tests for the CSV Value Formatter

Tests cell formatting including:
- Null substitution
- Date rendering
- Sequence and mapping cells
- Quote escaping and quoting rules
"""

from datetime import date, datetime

import pytest

from data_exporter.output.value_formatter import (
    format_csv_row,
    format_csv_value,
    is_sequence,
)


@pytest.fixture
def csv_config():
    """Default CSV formatting options."""
    return {
        'delimiter': ',',
        'quote_strings': True,
        'escape_quotes': True,
        'date_format': 'iso',
        'null_value': '',
    }


class TestNullAndDates:
    """Test null and date handling."""

    def test_none_uses_null_value(self, csv_config):
        csv_config['null_value'] = 'N/A'
        assert format_csv_value(None, csv_config) == 'N/A'

    def test_none_defaults_to_empty(self, csv_config):
        assert format_csv_value(None, csv_config) == ''

    def test_datetime_iso(self, csv_config):
        value = datetime(2023, 1, 15, 9, 30)
        assert format_csv_value(value, csv_config) == '2023-01-15T09:30:00'

    def test_date_iso(self, csv_config):
        assert format_csv_value(date(2022, 11, 10), csv_config) == '2022-11-10'

    def test_datetime_non_iso_uses_str(self, csv_config):
        """Any other date_format falls back to str()."""
        csv_config['date_format'] = 'default'
        value = datetime(2023, 1, 15)
        assert format_csv_value(value, csv_config) == '2023-01-15 00:00:00'


class TestCompositeValues:
    """Test sequences and mappings reaching the formatter."""

    def test_list_joined_and_quoted(self, csv_config):
        assert format_csv_value(['a', 'b', 'c'], csv_config) == '"a; b; c"'

    def test_list_quoted_even_without_quote_strings(self, csv_config):
        csv_config['quote_strings'] = False
        assert format_csv_value([1, 2], csv_config) == '"1; 2"'

    def test_empty_list(self, csv_config):
        assert format_csv_value([], csv_config) == '""'

    def test_mapping_encoded_as_json(self, csv_config):
        assert format_csv_value({'k': 1}, csv_config) == '"{"k":1}"'


class TestScalarQuoting:
    """Test escaping and quoting of scalar text."""

    def test_plain_string_unchanged(self, csv_config):
        assert format_csv_value('hello', csv_config) == 'hello'

    def test_number_stringified(self, csv_config):
        assert format_csv_value(42, csv_config) == '42'
        assert format_csv_value(1.5, csv_config) == '1.5'

    def test_bool_lowercase(self, csv_config):
        assert format_csv_value(True, csv_config) == 'true'
        assert format_csv_value(False, csv_config) == 'false'

    def test_delimiter_triggers_quoting(self, csv_config):
        assert format_csv_value('a,b', csv_config) == '"a,b"'

    def test_quotes_doubled_then_wrapped(self, csv_config):
        result = format_csv_value('He said "hi"', csv_config)
        assert result == '"He said ""hi"""'

    def test_newline_triggers_quoting(self, csv_config):
        assert format_csv_value('line\nbreak', csv_config) == '"line\nbreak"'
        assert format_csv_value('line\rbreak', csv_config) == '"line\rbreak"'

    def test_no_quoting_when_disabled(self, csv_config):
        csv_config['quote_strings'] = False
        assert format_csv_value('a,b', csv_config) == 'a,b'

    def test_quote_wrapped_without_escaping(self, csv_config):
        csv_config['escape_quotes'] = False
        assert format_csv_value('say "x"', csv_config) == '"say "x""'

    def test_custom_delimiter(self, csv_config):
        csv_config['delimiter'] = ';'
        assert format_csv_value('a,b', csv_config) == 'a,b'
        assert format_csv_value('a;b', csv_config) == '"a;b"'


class TestHelpers:
    """Test row joining and type checks."""

    def test_format_csv_row(self):
        assert format_csv_row(['1', 'A', ''], ',') == '1,A,'

    def test_strings_are_not_sequences(self):
        assert not is_sequence('abc')
        assert not is_sequence(b'abc')
        assert is_sequence(['a'])
        assert is_sequence(('a',))
