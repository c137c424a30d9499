"""Shared utilities: key paths, merging, text, I/O and profiling."""
from __future__ import annotations

from .keypath import delete_key, get_path, set_path, split_path
from .merge import assign_into, deep_merge_into, is_plain_mapping
from .text import camel_case, split_words

__all__ = [
    "get_path",
    "set_path",
    "delete_key",
    "split_path",
    "deep_merge_into",
    "assign_into",
    "is_plain_mapping",
    "camel_case",
    "split_words",
]
