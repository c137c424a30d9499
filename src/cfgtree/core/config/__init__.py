"""cfgtree configuration system.

Usage:
    from cfgtree.core.config import ConfigManager

    manager = ConfigManager(root=Path("/srv/app"))
    manager.get("db.host", "localhost")
    manager.merge({"db": {"pool": 5}})

    # Process-wide manager used by the module-level API
    from cfgtree.core.config import get_default_manager
    get_default_manager().get("db.host")
"""
from __future__ import annotations

from .cache import (
    FileContentCache,
    clear_default_manager,
    get_default_manager,
    set_default_manager,
)
from .environment import DEFAULT_ENVIRONMENT, EnvironmentResolver
from .manager import ConfigManager
from .sources import EnvOverride, FileSource

__all__ = [
    "ConfigManager",
    "EnvironmentResolver",
    "DEFAULT_ENVIRONMENT",
    "FileSource",
    "EnvOverride",
    "FileContentCache",
    "get_default_manager",
    "set_default_manager",
    "clear_default_manager",
]
