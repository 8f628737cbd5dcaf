# Path: data_exporter/config_loader.py
"""
Configuration Loader for data_exporter

Loads configuration from a .env file and the process environment.
Singleton pattern ensures consistent configuration across all components.

All settings are optional; every key has a default defined in
constants.py or below. Values seed the exporter-level defaults of
DataExporter and the logging setup of the command-line entry point.
"""

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_CREATE_TIMESTAMP,
    DEFAULT_CSV_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_JSON_PRETTIFY,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_DIR,
)


# ==============================================================================
# DEFAULT CONFIGURATION VALUES
# ==============================================================================

ENV_PREFIX: str = 'DATA_EXPORTER_'

# Logging Defaults
DEFAULT_LOG_LEVEL: str = 'INFO'
DEFAULT_LOG_CONSOLE: bool = True


class ConfigLoader:
    """
    Singleton configuration loader for data_exporter.

    Loads configuration from environment variables with type
    conversion and defaults.

    Example:
        config = ConfigLoader()
        output_dir = config.get('output_dir')  # Returns Path object
        defaults = config.exporter_defaults()
    """

    _instance: Optional['ConfigLoader'] = None
    _initialized: bool = False

    def __new__(cls) -> 'ConfigLoader':
        """Ensure only one instance exists (singleton pattern)."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """
        Initialize configuration loader.

        Only runs once due to singleton pattern. Loads .env from the
        current working directory when present. Variables already set
        in the environment take precedence over the file.
        """
        if ConfigLoader._initialized:
            return

        env_path = Path.cwd() / '.env'
        if env_path.exists():
            load_dotenv(dotenv_path=env_path, interpolate=True)

        self._config = self._load_configuration()
        ConfigLoader._initialized = True

    def _load_configuration(self) -> dict[str, Any]:
        """
        Load all configuration from environment.

        Returns:
            Dictionary of configuration values with proper types
        """
        config = {
            # ================================================================
            # ENVIRONMENT
            # ================================================================
            'environment': self._get_env('ENVIRONMENT', 'development'),

            # ================================================================
            # EXPORT DEFAULTS
            # ================================================================
            'output_dir': self._get_path('OUTPUT_DIR') or Path(DEFAULT_OUTPUT_DIR),
            'create_timestamp': self._get_bool(
                'CREATE_TIMESTAMP', DEFAULT_CREATE_TIMESTAMP
            ),
            'encoding': self._get_env('ENCODING', DEFAULT_ENCODING),
            'json_prettify': self._get_bool('JSON_PRETTIFY', DEFAULT_JSON_PRETTIFY),
            'csv_delimiter': self._get_env('CSV_DELIMITER', DEFAULT_CSV_DELIMITER),
            'max_depth': self._get_int('MAX_DEPTH', DEFAULT_MAX_DEPTH),

            # ================================================================
            # LOGGING CONFIGURATION
            # ================================================================
            'log_dir': self._get_path('LOG_DIR'),
            'log_level': self._get_env('LOG_LEVEL', DEFAULT_LOG_LEVEL),
            'log_console': self._get_bool('LOG_CONSOLE', DEFAULT_LOG_CONSOLE),
        }

        return config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        return self._config.get(key, default)

    def exporter_defaults(self) -> dict[str, Any]:
        """
        Build exporter-level default options.

        Returns:
            Option dictionary in the naming used by export calls
        """
        return {
            'output_dir': self._config['output_dir'],
            'create_timestamp': self._config['create_timestamp'],
            'encoding': self._config['encoding'],
            'prettify': self._config['json_prettify'],
            'delimiter': self._config['csv_delimiter'],
            'max_depth': self._config['max_depth'],
        }

    def _get_path(self, key: str, required: bool = False) -> Optional[Path]:
        """
        Get path from environment variable.

        Args:
            key: Variable name without the DATA_EXPORTER_ prefix
            required: If True, raise error when missing

        Returns:
            Path object or None

        Raises:
            ValueError: If required and missing
        """
        value = os.getenv(ENV_PREFIX + key)

        if value is None or value == '':
            if required:
                raise ValueError(f"Required path not configured: {ENV_PREFIX}{key}")
            return None

        # Handle variable interpolation
        if '${' in value:
            value = os.path.expandvars(value)

        return Path(value)

    def _get_env(self, key: str, default: str = '') -> str:
        """Get string environment variable."""
        return os.getenv(ENV_PREFIX + key, default)

    def _get_int(self, key: str, default: int) -> int:
        """Get integer environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    def _get_bool(self, key: str, default: bool) -> bool:
        """Get boolean environment variable."""
        value = os.getenv(ENV_PREFIX + key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')

    def __repr__(self) -> str:
        """String representation showing key settings."""
        return (
            f"ConfigLoader("
            f"output_dir={self._config.get('output_dir')}, "
            f"environment={self._config.get('environment')})"
        )


__all__ = ['ConfigLoader']
