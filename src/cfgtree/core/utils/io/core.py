"""Core file access helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Union

from cfgtree.core.exceptions import FileReadError

PathLike = Union[str, Path]


def read_bytes(path: PathLike) -> bytes:
    """Read the raw bytes of ``path``.

    Raises:
        FileReadError: If the file is missing or unreadable, or the path is
            invalid (e.g. contains a NUL byte).
    """
    try:
        return Path(path).read_bytes()
    except (OSError, ValueError) as exc:
        raise FileReadError(
            f"Cannot read file: {path}",
            context={"path": str(path), "reason": getattr(exc, "strerror", None) or str(exc)},
        ) from exc


__all__ = ["PathLike", "read_bytes"]
