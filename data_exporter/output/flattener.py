# Path: data_exporter/output/flattener.py
"""
Object Flattener

Collapses nested mappings into a single-level mapping whose keys are
dotted paths: {'a': {'b': 1}} -> {'a.b': 1}.

Only mappings are descended. Sequences are terminal values and are
returned as-is. Recursion stops at max_depth; a mapping found at the
depth limit is returned unchanged and its keys are merged in as they
are, without the parent path.

When two different paths produce the same dotted key, the one seen
last wins.
"""

from collections.abc import Mapping
from typing import Any

from ..constants import DEFAULT_MAX_DEPTH, KEY_PATH_SEPARATOR


def flatten(
    value: Any,
    prefix: str = '',
    max_depth: int = DEFAULT_MAX_DEPTH,
    depth: int = 0,
) -> Any:
    """
    Flatten a nested mapping into dotted key paths.

    Args:
        value: Mapping to flatten (other values are returned unchanged)
        prefix: Key path of value within the outermost mapping
        max_depth: Number of mapping levels to descend
        depth: Current recursion depth

    Returns:
        New flat dict, or value itself when it is terminal

    Example:
        flatten({'user': {'name': 'A', 'tags': ['x']}})
        # {'user.name': 'A', 'user.tags': ['x']}
    """
    if depth >= max_depth or not isinstance(value, Mapping):
        return value

    flattened = {}
    for key, item in value.items():
        new_key = f'{prefix}{KEY_PATH_SEPARATOR}{key}' if prefix else str(key)

        if isinstance(item, Mapping):
            flattened.update(flatten(item, new_key, max_depth, depth + 1))
        else:
            flattened[new_key] = item

    return flattened


__all__ = ['flatten']
