"""In-place merge primitives for the configuration tree.

Merge rules:
- dict + dict under the same key: recurse
- anything else (scalars, lists, ``Computed`` values, objects): the source
  value replaces the destination value as-is, without being evaluated
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from cfgtree.core.computed import Computed


def is_plain_mapping(value: Any) -> bool:
    """True for dict values that merge recursively (``Computed`` never qualifies)."""
    return isinstance(value, dict) and not isinstance(value, Computed)


def deep_merge_into(dest: Dict[str, Any], src: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Recursively merge ``src`` into ``dest`` in place and return ``dest``.

    Example:
        >>> deep_merge_into({"a": {"x": 1}}, {"a": {"y": 2}})
        {'a': {'x': 1, 'y': 2}}
        >>> deep_merge_into({"a": [1, 2]}, {"a": {"y": 2}})
        {'a': {'y': 2}}
    """
    if not isinstance(src, Mapping):
        return dest

    for key, value in src.items():
        if key in dest and is_plain_mapping(dest[key]) and is_plain_mapping(value):
            deep_merge_into(dest[key], value)
            continue
        dest[key] = value
    return dest


def assign_into(dest: Dict[str, Any], src: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Shallow top-level replacement of ``dest`` keys from ``src``."""
    if not isinstance(src, Mapping):
        return dest
    for key, value in src.items():
        dest[key] = value
    return dest


__all__ = ["is_plain_mapping", "deep_merge_into", "assign_into"]
