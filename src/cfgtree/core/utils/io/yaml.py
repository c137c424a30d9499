"""YAML I/O utilities."""
from __future__ import annotations

import fcntl
from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.
    An empty document yields ``default``.

    Args:
        path: YAML file path to read
        default: Value to return if file missing, empty or invalid
        raise_on_error: If True, propagate exceptions instead of returning default.

    Examples:
        >>> config = read_yaml(Path("config.yaml"), default={})
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            fcntl.flock(f.fileno(), fcntl.LOCK_SH)
            try:
                data = yaml.safe_load(f)
            finally:
                fcntl.flock(f.fileno(), fcntl.LOCK_UN)
        return data if data is not None else default
    except Exception:
        if raise_on_error:
            raise
        return default


def dump_yaml_string(data: Any, sort_keys: bool = True) -> str:
    """Dump data to a YAML string (block style, unicode preserved)."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=sort_keys,
        allow_unicode=True,
    )


__all__ = ["read_yaml", "dump_yaml_string"]
