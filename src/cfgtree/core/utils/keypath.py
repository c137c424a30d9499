"""Dotted key-path access on a nested configuration tree.

Paths are plain strings split on ``.``: ``"db.replicas.0.host"``. Each segment
is a literal key; there is no escaping, so keys that themselves contain dots
cannot be addressed. List containers accept decimal indices.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Sequence, Union

from cfgtree.core.computed import Computed

KeyPath = Union[str, Sequence[str]]

_MISSING = object()


def split_path(path: KeyPath) -> List[str]:
    """Split ``path`` into segments. Sequences are taken as already split."""
    if isinstance(path, str):
        return path.split(".")
    return [str(part) for part in path]


def _is_index(segment: str) -> bool:
    return segment.isascii() and segment.isdigit()


def _index(segment: str) -> int | None:
    if _is_index(segment):
        return int(segment)
    return None


def _child(container: Any, segment: str) -> Any:
    """Return the value under ``segment`` or ``_MISSING``; evaluates ``Computed``."""
    if isinstance(container, Mapping):
        if segment not in container:
            return _MISSING
        value = container[segment]
        if isinstance(value, Computed):
            return value.resolve(container)
        return value
    if isinstance(container, list):
        idx = _index(segment)
        if idx is None or idx >= len(container):
            return _MISSING
        return container[idx]
    return _MISSING


def _store(container: Any, segment: str, value: Any) -> None:
    if isinstance(container, list):
        idx = _index(segment)
        if idx is None:
            raise TypeError(f"List segment must be an index, got {segment!r}")
        while len(container) <= idx:
            container.append(None)
        container[idx] = value
        return

    current = container.get(segment, _MISSING)
    if isinstance(current, Computed) and current.writable:
        current.assign(container, value)
        return
    container[segment] = value


def _is_container(value: Any, next_segment: str) -> bool:
    if isinstance(value, dict):
        return True
    return isinstance(value, list) and _is_index(next_segment)


def get_path(tree: Dict[str, Any], path: KeyPath, default: Any = None) -> Any:
    """Return the value at ``path`` or ``default`` when any segment is absent.

    Example:
        >>> get_path({"a": {"b": 1}}, "a.b")
        1
        >>> get_path({"a": {"b": 1}}, "a.c", "fallback")
        'fallback'
    """
    current: Any = tree
    for segment in split_path(path):
        current = _child(current, segment)
        if current is _MISSING:
            return default
    return current


def set_path(tree: Dict[str, Any], path: KeyPath, value: Any) -> Any:
    """Set ``value`` at ``path`` and return the previous value (``None`` if unset).

    Missing intermediate containers are created as dicts. An intermediate that
    is not a container is replaced by a new dict.
    """
    segments = split_path(path)
    parent: Any = tree
    for position, segment in enumerate(segments[:-1]):
        child = _child(parent, segment)
        if child is _MISSING or not _is_container(child, segments[position + 1]):
            child = {}
            _store(parent, segment, child)
        parent = child

    leaf = segments[-1]
    previous = _child(parent, leaf)
    _store(parent, leaf, value)
    return None if previous is _MISSING else previous


def delete_key(tree: Dict[str, Any], key: str) -> None:
    """Remove a single top-level ``key``. Not path-aware."""
    tree.pop(key, None)


__all__ = ["KeyPath", "split_path", "get_path", "set_path", "delete_key"]
