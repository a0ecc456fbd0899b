"""Canonical deep merge utilities.

Single source of truth for merging profile documents and configuration
layers. Semantics:

- Two mappings merge key by key, recursively.
- Anything else (scalars, arrays, or a mapping meeting a non-mapping) is
  replaced wholesale by the higher-priority value. Arrays are never merged
  element-wise.
"""
from __future__ import annotations

import copy
from collections.abc import MutableMapping
from typing import Any, Dict


def deep_merge_into(into: Any, source: Any) -> Any:
    """Merge ``source`` into ``into`` and return the merged value.

    When both operands are mappings, ``into`` is updated in place and returned.
    Keys missing from ``into`` receive a placeholder before the recursive merge
    so the nested merge always has a target. Otherwise ``source`` replaces
    ``into`` and is returned; callers must store the return value.

    Example:
        >>> target = {"a": 1, "b": {"c": 2}}
        >>> deep_merge_into(target, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    if not (isinstance(into, MutableMapping) and isinstance(source, MutableMapping)):
        return source

    for key, value in source.items():
        if key not in into:
            into[key] = None
        into[key] = deep_merge_into(into[key], value)
    return into


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Args:
        base: Base dictionary (lower priority)
        override: Override dictionary (higher priority)

    Returns:
        New merged dictionary

    Example:
        >>> deep_merge({"temps": [200, 205]}, {"temps": [210]})
        {'temps': [210]}
    """
    return deep_merge_into(copy.deepcopy(base), copy.deepcopy(override or {}))


__all__ = ["deep_merge", "deep_merge_into"]
