"""JSON I/O utilities."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from cfgtree.core.exceptions import JSONParseError


def read_json(path: Path, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read a JSON file, mirroring ``read_yaml`` error semantics."""
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except Exception:
        if raise_on_error:
            raise
        return default


def parse_json_value(text: str, *, source: str = "") -> Any:
    """Parse ``text`` as JSON.

    Raises:
        JSONParseError: If ``text`` is not valid JSON. ``source`` names the
            origin of the text in the error context.
    """
    try:
        return json.loads(text)
    except ValueError as exc:
        raise JSONParseError(
            f"Invalid JSON in {source or 'value'}: {exc}",
            context={"source": source},
        ) from exc


__all__ = ["read_json", "parse_json_value"]
