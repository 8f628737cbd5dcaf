# Path: data_exporter/tests/unit/test_config_loader.py
"""
Unit Tests for ConfigLoader

Tests the configuration loading functionality including:
- Environment variable parsing
- Type conversion methods
- Singleton pattern
- Default value handling
- .env file loading
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from data_exporter.config_loader import ConfigLoader


@pytest.fixture
def clean_env(monkeypatch, temp_dir):
    """Remove DATA_EXPORTER_* variables and run from an empty directory."""
    for key in list(os.environ):
        if key.startswith('DATA_EXPORTER_'):
            monkeypatch.delenv(key)
    monkeypatch.chdir(temp_dir)


class TestConfigLoaderBasics:
    """Test basic ConfigLoader functionality."""

    def test_singleton_pattern(self, mock_env_vars, reset_singletons):
        """ConfigLoader should return same instance."""
        config1 = ConfigLoader()
        config2 = ConfigLoader()

        assert config1 is config2

    def test_get_returns_value(self, mock_env_vars, reset_singletons):
        config = ConfigLoader()
        assert config.get('environment') == 'test'

    def test_get_returns_default_for_missing(self, mock_env_vars, reset_singletons):
        config = ConfigLoader()
        assert config.get('nonexistent_key', 'default_value') == 'default_value'
        assert config.get('nonexistent_key') is None

    def test_repr_mentions_output_dir(self, mock_env_vars, reset_singletons):
        assert 'output_dir=' in repr(ConfigLoader())


class TestConfigLoaderTypeConversion:
    """Test type conversion methods."""

    def test_output_dir_is_path(self, mock_env_vars, reset_singletons):
        config = ConfigLoader()
        assert config.get('output_dir') == Path(mock_env_vars['DATA_EXPORTER_OUTPUT_DIR'])

    def test_bool_conversion(self, mock_env_vars, reset_singletons):
        config = ConfigLoader()
        assert config.get('create_timestamp') is False
        assert config.get('log_console') is False
        assert config.get('json_prettify') is False

    def test_int_conversion(self, mock_env_vars, reset_singletons):
        assert ConfigLoader().get('max_depth') == 5

    def test_invalid_int_falls_back(self, reset_singletons):
        with patch.dict(os.environ, {'DATA_EXPORTER_MAX_DEPTH': 'deep'}):
            assert ConfigLoader().get('max_depth') == 3

    def test_log_dir_unset_is_none(self, clean_env, reset_singletons):
        assert ConfigLoader().get('log_dir') is None


class TestConfigLoaderDefaults:
    """Test defaults when nothing is configured."""

    def test_defaults(self, clean_env, reset_singletons):
        config = ConfigLoader()

        assert config.get('environment') == 'development'
        assert config.get('output_dir') == Path('./exports')
        assert config.get('create_timestamp') is True
        assert config.get('encoding') == 'utf-8'
        assert config.get('log_level') == 'INFO'

    def test_exporter_defaults(self, mock_env_vars, reset_singletons):
        defaults = ConfigLoader().exporter_defaults()

        assert defaults == {
            'output_dir': Path(mock_env_vars['DATA_EXPORTER_OUTPUT_DIR']),
            'create_timestamp': False,
            'encoding': 'utf-8',
            'prettify': False,
            'delimiter': ';',
            'max_depth': 5,
        }


class TestDotenvLoading:
    """Test .env file loading."""

    def test_env_file_loaded(self, clean_env, temp_dir, reset_singletons):
        (temp_dir / '.env').write_text(
            'DATA_EXPORTER_ENVIRONMENT=staging\n'
            'DATA_EXPORTER_CSV_DELIMITER=|\n'
        )

        with patch.dict(os.environ, {}):
            config = ConfigLoader()
            assert config.get('environment') == 'staging'
            assert config.exporter_defaults()['delimiter'] == '|'

    def test_environment_beats_env_file(self, clean_env, temp_dir, reset_singletons):
        (temp_dir / '.env').write_text('DATA_EXPORTER_ENVIRONMENT=staging\n')

        with patch.dict(os.environ, {'DATA_EXPORTER_ENVIRONMENT': 'production'}):
            assert ConfigLoader().get('environment') == 'production'
