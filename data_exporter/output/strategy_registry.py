# Path: data_exporter/output/strategy_registry.py
"""
Strategy Registry

Maps format identifiers to strategy classes. New formats register
here to become available to DataExporter without changes to the
pipeline.

Identifiers are case-insensitive. Registering an identifier again
replaces the previous strategy.

Usage:
    registry = StrategyRegistry()
    registry.register('xml', XmlStrategy)
    strategy = registry.create('XML')
"""

from typing import Any, Dict, List, Type

from ..constants import FORMAT_CSV, FORMAT_JSON
from ..core.errors import ConfigurationError, UnsupportedFormatError
from ..core.logger import get_output_logger
from .strategies import (
    REQUIRED_CAPABILITIES,
    CsvStrategy,
    JsonStrategy,
    conforms_to_strategy,
)


class StrategyRegistry:
    """
    Registry of export strategy classes.

    Each instance starts with the built-in json and csv strategies.
    Registrations on one instance do not affect other instances.
    """

    def __init__(self):
        self._strategies: Dict[str, Type[Any]] = {}
        self.logger = get_output_logger('strategy_registry')
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register built-in strategies."""
        self.register(FORMAT_JSON, JsonStrategy)
        self.register(FORMAT_CSV, CsvStrategy)

    def register(self, format_id: str, strategy_class: Type[Any]) -> 'StrategyRegistry':
        """
        Register a strategy class for a format.

        Args:
            format_id: Format identifier (case-insensitive)
            strategy_class: Class providing the strategy capabilities

        Returns:
            This registry, for chaining

        Raises:
            ConfigurationError: If the identifier is blank or the class
                does not provide every required method
        """
        if not isinstance(format_id, str) or not format_id.strip():
            raise ConfigurationError(
                f"Format identifier must be a non-empty string, got {format_id!r}"
            )

        if not conforms_to_strategy(strategy_class):
            name = getattr(strategy_class, '__name__', repr(strategy_class))
            raise ConfigurationError(
                f"{name} must be a class providing: "
                f"{', '.join(REQUIRED_CAPABILITIES)}",
                format_id=format_id,
            )

        key = self._normalize(format_id)
        if key in self._strategies:
            self.logger.debug(f"Replacing strategy for format: {key}")
        self._strategies[key] = strategy_class
        return self

    def unregister(self, format_id: str) -> None:
        """Remove a registered strategy; unknown formats are ignored."""
        self._strategies.pop(self._normalize(format_id), None)

    def resolve(self, format_id: str) -> Type[Any]:
        """
        Look up the strategy class for a format.

        Raises:
            UnsupportedFormatError: If no strategy is registered
        """
        strategy_class = self._strategies.get(self._normalize(format_id))
        if strategy_class is None:
            raise UnsupportedFormatError(
                f"Unsupported export format: {format_id}", format_id=format_id,
            )
        return strategy_class

    def create(self, format_id: str) -> Any:
        """
        Instantiate the strategy registered for a format.

        Raises:
            UnsupportedFormatError: If no strategy is registered
            ConfigurationError: If the strategy class cannot be
                instantiated without arguments
        """
        strategy_class = self.resolve(format_id)
        try:
            return strategy_class()
        except Exception as e:
            raise ConfigurationError(
                f"Cannot create {strategy_class.__name__} strategy: {e}",
                format_id=format_id,
            ) from e

    def list_formats(self) -> List[str]:
        """Return registered format identifiers in registration order."""
        return list(self._strategies.keys())

    def is_supported(self, format_id: str) -> bool:
        """Check whether a format has a registered strategy."""
        return self._normalize(format_id) in self._strategies

    @staticmethod
    def _normalize(format_id: Any) -> str:
        return str(format_id).strip().lower()


__all__ = ['StrategyRegistry']
