"""Module-level configuration API backed by the process-wide ``ConfigManager``.

    import cfgtree

    cfgtree.get("db.host", "localhost")
    cfgtree.set("db.port", 5433)
    cfgtree.merge({"db": {"pool": 5}, "$env_production": {"db": {"pool": 20}}})
    if cfgtree.is_production():
        ...
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from cfgtree.core.config.cache import get_default_manager
from cfgtree.core.utils.keypath import KeyPath

_MISSING = object()


def get(key: KeyPath, default: Any = None) -> Any:
    return get_default_manager().get(key, default)


def set(key: Union[KeyPath, Mapping[str, Any]], value: Any = _MISSING) -> Any:  # noqa: A001
    """Set ``key`` to ``value`` (returns the previous value), or assign a mapping."""
    if value is _MISSING:
        if isinstance(key, Mapping):
            return get_default_manager().set(key)
        value = None
    return get_default_manager().set(key, value)


def merge(obj: Any) -> None:
    get_default_manager().merge(obj)


def assign(obj: Any) -> None:
    get_default_manager().assign(obj)


def delete(key: str) -> None:
    get_default_manager().delete(key)


def file(
    path: Union[str, Path],
    *,
    ignore_not_found: bool = False,
    ignore_errors: bool = False,
    overwrite: bool = False,
) -> None:
    get_default_manager().file(
        path,
        ignore_not_found=ignore_not_found,
        ignore_errors=ignore_errors,
        overwrite=overwrite,
    )


def read(key: KeyPath) -> Optional[bytes]:
    return get_default_manager().read(key)


def dump_config() -> Dict[str, Any]:
    return get_default_manager().dump_config()


def active_environment_name() -> str:
    return get_default_manager().active_environment_name()


def is_production() -> bool:
    return get_default_manager().is_production()


def is_staging() -> bool:
    return get_default_manager().is_staging()


def is_production_like() -> bool:
    return get_default_manager().is_production_like()


def is_test() -> bool:
    return get_default_manager().is_test()


def is_dev() -> bool:
    return get_default_manager().is_dev()


def is_ci() -> bool:
    return get_default_manager().is_ci()


env = get_env = active_environment_name
is_prod = is_production
is_prod_like = is_production_like
is_development = is_dev


__all__ = [
    "get",
    "set",
    "merge",
    "assign",
    "delete",
    "file",
    "read",
    "dump_config",
    "active_environment_name",
    "env",
    "get_env",
    "is_production",
    "is_prod",
    "is_staging",
    "is_production_like",
    "is_prod_like",
    "is_test",
    "is_dev",
    "is_development",
    "is_ci",
]
