# Path: data_exporter/tests/unit/test_strategy_registry.py
"""
Unit Tests for StrategyRegistry

Tests registration, lookup and capability checks.
"""

import pytest

from data_exporter.core.errors import ConfigurationError, UnsupportedFormatError
from data_exporter.output.strategies import CsvStrategy, JsonStrategy
from data_exporter.output.strategy_registry import StrategyRegistry


class TextStrategy:
    """Minimal conforming strategy."""

    def default_options(self):
        return {}

    def validate(self, data):
        pass

    def transform(self, data, config):
        return data

    def serialize(self, data, config):
        return str(data)


class NeedsArgStrategy(TextStrategy):
    """Strategy requiring a constructor argument."""

    def __init__(self, name):
        self.name = name


class MissingSerialize:
    """Strategy lacking serialize()."""

    def default_options(self):
        return {}

    def validate(self, data):
        pass

    def transform(self, data, config):
        return data


class TestRegistryDefaults:
    """Test built-in registrations."""

    def test_builtin_formats(self):
        registry = StrategyRegistry()
        assert registry.list_formats() == ['json', 'csv']

    def test_resolve_builtins(self):
        registry = StrategyRegistry()
        assert registry.resolve('json') is JsonStrategy
        assert registry.resolve('csv') is CsvStrategy

    def test_create_returns_instance(self):
        assert isinstance(StrategyRegistry().create('CSV'), CsvStrategy)


class TestRegistration:
    """Test custom strategy registration."""

    def test_register_is_case_insensitive(self):
        registry = StrategyRegistry()
        registry.register('TXT', TextStrategy)

        assert registry.resolve('txt') is TextStrategy
        assert registry.resolve('Txt') is TextStrategy
        assert registry.is_supported('tXt')
        assert 'txt' in registry.list_formats()

    def test_register_overwrites_silently(self):
        registry = StrategyRegistry()
        registry.register('json', TextStrategy)
        assert registry.resolve('json') is TextStrategy
        assert registry.list_formats().count('json') == 1

    def test_register_returns_registry(self):
        registry = StrategyRegistry()
        assert registry.register('txt', TextStrategy) is registry

    def test_missing_capability_rejected(self):
        registry = StrategyRegistry()
        with pytest.raises(ConfigurationError, match='serialize'):
            registry.register('bad', MissingSerialize)
        assert not registry.is_supported('bad')

    def test_instance_rejected(self):
        with pytest.raises(ConfigurationError):
            StrategyRegistry().register('txt', TextStrategy())

    def test_function_rejected(self):
        with pytest.raises(ConfigurationError):
            StrategyRegistry().register('txt', lambda: TextStrategy())

    @pytest.mark.parametrize('format_id', ['', '   ', None])
    def test_blank_identifier_rejected(self, format_id):
        with pytest.raises(ConfigurationError):
            StrategyRegistry().register(format_id, TextStrategy)

    def test_registries_are_independent(self):
        first = StrategyRegistry()
        second = StrategyRegistry()
        first.register('txt', TextStrategy)
        assert not second.is_supported('txt')


class TestLookup:
    """Test resolve/unregister."""

    def test_unknown_format_raises(self):
        with pytest.raises(UnsupportedFormatError, match='xml') as exc_info:
            StrategyRegistry().resolve('xml')
        assert exc_info.value.format_id == 'xml'

    def test_unregister(self):
        registry = StrategyRegistry()
        registry.unregister('CSV')
        assert registry.list_formats() == ['json']
        with pytest.raises(UnsupportedFormatError):
            registry.create('csv')

    def test_unregister_unknown_is_noop(self):
        registry = StrategyRegistry()
        registry.unregister('xml')
        assert registry.list_formats() == ['json', 'csv']

    def test_create_failure_is_configuration_error(self):
        registry = StrategyRegistry().register('named', NeedsArgStrategy)

        with pytest.raises(ConfigurationError, match='NeedsArgStrategy') as exc_info:
            registry.create('NAMED')
        assert exc_info.value.format_id == 'NAMED'
