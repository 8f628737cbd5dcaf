# Path: data_exporter/output/export_config.py
"""
Export Configuration

Layered option merging for export calls.

Options are merged in increasing precedence:
    base defaults -> strategy defaults -> exporter defaults -> call options

The result is a read-only mapping. Each export call builds its own,
so nothing a strategy does can change the options mid-export or leak
them into the next call.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Optional

from ..constants import DEFAULT_ENCODING


BASE_DEFAULTS: Mapping[str, Any] = MappingProxyType({
    'output_path': None,
    'encoding': DEFAULT_ENCODING,
})


def merge_config(*layers: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """
    Merge option layers into one read-only configuration.

    Args:
        *layers: Option mappings, lowest precedence first; None is skipped

    Returns:
        Read-only merged mapping, base defaults included

    Example:
        config = merge_config(strategy.default_options(), {'prettify': False})
        config['prettify']  # False
    """
    merged = dict(BASE_DEFAULTS)
    for layer in layers:
        if layer:
            merged.update(layer)
    return MappingProxyType(merged)


__all__ = ['BASE_DEFAULTS', 'merge_config']
