# Path: data_exporter/tests/conftest.py
"""
Pytest Configuration and Shared Fixtures for data_exporter

Provides common test fixtures used across all test modules.
"""

import json
import os
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest


# ==============================================================================
# ENVIRONMENT FIXTURES
# ==============================================================================

@pytest.fixture
def mock_env_vars(temp_dir):
    """Provide mock environment variables for testing."""
    env_vars = {
        'DATA_EXPORTER_ENVIRONMENT': 'test',
        'DATA_EXPORTER_OUTPUT_DIR': str(temp_dir / 'exports'),
        'DATA_EXPORTER_CREATE_TIMESTAMP': 'false',
        'DATA_EXPORTER_ENCODING': 'utf-8',
        'DATA_EXPORTER_JSON_PRETTIFY': 'false',
        'DATA_EXPORTER_CSV_DELIMITER': ';',
        'DATA_EXPORTER_MAX_DEPTH': '5',
        'DATA_EXPORTER_LOG_LEVEL': 'DEBUG',
        'DATA_EXPORTER_LOG_CONSOLE': 'false',
    }

    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ==============================================================================
# SAMPLE DATA FIXTURES
# ==============================================================================

@pytest.fixture
def flat_records():
    """Provide flat records with identical keys."""
    return [
        {'id': 1, 'name': 'John Doe', 'active': True},
        {'id': 2, 'name': 'Jane Smith', 'active': True},
        {'id': 3, 'name': 'Bob Johnson', 'active': False},
    ]


@pytest.fixture
def nested_records():
    """Provide records with nested profiles, lists and dates."""
    return [
        {
            'id': 1,
            'name': 'John Doe',
            'email': 'john@example.com',
            'profile': {
                'age': 30,
                'department': 'Engineering',
                'skills': ['Python', 'SQL'],
            },
            'joinDate': datetime(2023, 1, 15),
            'active': True,
        },
        {
            'id': 2,
            'name': 'Jane Smith',
            'email': 'jane@example.com',
            'profile': {
                'age': 28,
                'department': 'Design',
                'skills': ['Figma', 'CSS'],
            },
            'joinDate': datetime(2023, 3, 20),
            'active': True,
        },
    ]


@pytest.fixture
def heterogeneous_records():
    """Provide records whose key sets differ."""
    return [
        {'id': 1, 'name': 'A'},
        {'id': 2, 'email': 'b@example.com'},
        {'name': 'C', 'city': 'Lisbon'},
    ]


@pytest.fixture
def dataset_file(temp_dir, flat_records):
    """Write flat records to a JSON input file."""
    path = temp_dir / 'records.json'
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(flat_records, f, indent=2)
    return path


# ==============================================================================
# MOCK FIXTURES
# ==============================================================================

@pytest.fixture
def mock_config():
    """Create a mock ConfigLoader that keeps exports in memory."""
    config = MagicMock()
    config.exporter_defaults.return_value = {
        'output_dir': None,
        'create_timestamp': False,
        'encoding': 'utf-8',
    }
    config.get.side_effect = lambda key, default=None: {
        'environment': 'test',
        'log_dir': None,
        'log_level': 'INFO',
        'log_console': False,
    }.get(key, default)
    return config


@pytest.fixture
def exporter(mock_config):
    """DataExporter returning content instead of writing files."""
    from data_exporter.output import DataExporter
    return DataExporter(mock_config)


@pytest.fixture
def file_exporter(mock_config, temp_dir):
    """DataExporter writing into a temp directory without timestamps."""
    from data_exporter.output import DataExporter
    return DataExporter(mock_config, output_dir=temp_dir / 'exports')


# ==============================================================================
# UTILITY FIXTURES
# ==============================================================================

@pytest.fixture
def reset_singletons():
    """Reset any singleton instances between tests."""
    from data_exporter.config_loader import ConfigLoader
    ConfigLoader._instance = None
    ConfigLoader._initialized = False

    yield

    ConfigLoader._instance = None
    ConfigLoader._initialized = False
