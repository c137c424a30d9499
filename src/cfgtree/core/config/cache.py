"""Process-wide caches.

- ``FileContentCache``: raw bytes of files whose paths are stored in config
  keys. Entries are keyed by config key, filled once and never invalidated.
- The default ``ConfigManager`` shared by the module-level API.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional

from cfgtree.core.exceptions import FileReadError
from cfgtree.core.utils.io import read_bytes

if TYPE_CHECKING:
    from .manager import ConfigManager

logger = logging.getLogger(__name__)


class FileContentCache:
    """Cache of file contents keyed by the config key that names the file."""

    def __init__(self) -> None:
        self._entries: Dict[str, Optional[bytes]] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def get(self, key: str) -> Optional[bytes]:
        return self._entries.get(key)

    def load(self, key: str, path_value: Any) -> Optional[bytes]:
        """Fill the entry for ``key`` from ``path_value`` unless already cached.

        A falsy ``path_value`` or an unreadable file caches ``None``.
        """
        if key in self._entries:
            return self._entries[key]

        if not path_value:
            self._entries[key] = None
            return None

        try:
            content: Optional[bytes] = read_bytes(str(path_value))
        except FileReadError as exc:
            logger.error("Can't read file for config key %s: %s (%s)", key, path_value, exc)
            content = None

        self._entries[key] = content
        return content


# ---------------------------------------------------------------------------
# Default manager registry
# ---------------------------------------------------------------------------

_default_manager: Optional["ConfigManager"] = None


def get_default_manager() -> "ConfigManager":
    """Return the process-wide ``ConfigManager``, creating it on first use."""
    global _default_manager
    if _default_manager is None:
        from .manager import ConfigManager

        _default_manager = ConfigManager()
    return _default_manager


def set_default_manager(manager: Optional["ConfigManager"]) -> None:
    """Install ``manager`` as the process-wide manager (``None`` drops it)."""
    global _default_manager
    _default_manager = manager


def clear_default_manager() -> None:
    """Drop the process-wide manager so the next access builds a fresh one.

    Intended for test isolation; a manager never resets its own tree.
    """
    set_default_manager(None)


__all__ = [
    "FileContentCache",
    "get_default_manager",
    "set_default_manager",
    "clear_default_manager",
]
