"""File I/O helpers shared by the source loader and the file content cache."""
from __future__ import annotations

from .core import PathLike, read_bytes
from .json import parse_json_value, read_json
from .yaml import dump_yaml_string, read_yaml

__all__ = [
    "PathLike",
    "read_bytes",
    "read_json",
    "parse_json_value",
    "read_yaml",
    "dump_yaml_string",
]
