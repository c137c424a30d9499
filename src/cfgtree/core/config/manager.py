"""
cfgtree configuration manager.

A ``ConfigManager`` owns one configuration tree. The first read or write loads
the default sources (lowest to highest precedence):

1. ``<root>/config.yaml``
2. ``<root>/config.<env>.yaml``
3. ``<root>/config.CI.yaml`` (CI only)
4. ``<root>/private/config.yaml``
5. ``<root>/private/config.<env>.yaml``
6. ``<root>/private/config.CI.yaml`` (CI only)
7. The file named by the ``$privateConfigFile`` key, if set by the above
8. ``CFG__*`` environment variables

Every merged mapping may carry ``$env_<name>`` and ``$env_CI`` sub-mappings
that are applied on top of it when that environment (or CI) is active.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from cfgtree.core.computed import resolve_value
from cfgtree.core.exceptions import InvalidArgumentError, SourceNotFoundError
from cfgtree.core.utils.keypath import KeyPath, delete_key, get_path, set_path
from cfgtree.core.utils.merge import assign_into, deep_merge_into
from cfgtree.core.utils.profiling import span

from .cache import FileContentCache
from .environment import EnvironmentResolver
from .sources import (
    ENV_PREFIX,
    JSON_TAG,
    EnvOverride,
    FileSource,
    default_sources,
    iter_env_overrides,
    read_source_file,
)

logger = logging.getLogger(__name__)

_MISSING = object()

Combine = Callable[[Dict[str, Any], Optional[Mapping[str, Any]]], Dict[str, Any]]


class ConfigManager:
    """Layered, lazily loaded configuration tree with dotted-key access."""

    ENV_OVERRIDE_PREFIX = "$env_"
    CI_OVERRIDE_KEY = "$env_CI"
    PRIVATE_CONFIG_KEY = "$privateConfigFile"

    def __init__(
        self,
        root: Optional[Union[str, Path]] = None,
        *,
        environment: Optional[EnvironmentResolver] = None,
        env_prefix: str = ENV_PREFIX,
        json_tag: str = JSON_TAG,
    ) -> None:
        self._root = Path(root) if root is not None else None
        self.environment = environment or EnvironmentResolver()
        self.env_prefix = env_prefix
        self.json_tag = json_tag
        self._tree: Optional[Dict[str, Any]] = None
        self._file_cache = FileContentCache()

    @property
    def root(self) -> Path:
        """Directory holding the default config files (cwd unless given)."""
        return self._root if self._root is not None else Path.cwd()

    @property
    def loaded(self) -> bool:
        return self._tree is not None

    @property
    def file_cache(self) -> FileContentCache:
        return self._file_cache

    # ========== Environment ==========

    def active_environment_name(self) -> str:
        return self.environment.active_environment_name()

    env = active_environment_name
    get_env = active_environment_name

    def is_production(self) -> bool:
        return self.environment.is_production()

    def is_staging(self) -> bool:
        return self.environment.is_staging()

    def is_production_like(self) -> bool:
        return self.environment.is_production_like()

    def is_test(self) -> bool:
        return self.environment.is_test()

    def is_dev(self) -> bool:
        return self.environment.is_dev()

    def is_ci(self) -> bool:
        return self.environment.is_ci()

    is_prod = is_production
    is_prod_like = is_production_like
    is_development = is_dev

    # ========== Loading ==========

    def default_sources(self) -> List[FileSource]:
        """Default file sources for the current root, environment and CI mode."""
        return default_sources(self.root, self.active_environment_name(), self.is_ci())

    def env_overrides(self) -> List[EnvOverride]:
        """``CFG__`` overrides found in the process environment."""
        return list(
            iter_env_overrides(self.environment.environ, self.env_prefix, self.json_tag)
        )

    def _ensure_loaded(self) -> Dict[str, Any]:
        if self._tree is not None:
            return self._tree

        # Mark as loaded first so nested calls made while loading see a tree.
        self._tree = {}
        with span("config.load.defaults", root=str(self.root)):
            for source in self.default_sources():
                self.load_source(source)

            private_file = get_path(self._tree, self.PRIVATE_CONFIG_KEY)
            if private_file:
                self.file(private_file, ignore_not_found=True)

            with span("config.load.env"):
                self._apply_env_overrides()

        logger.debug(
            "Loaded configuration for environment %s from %s",
            self.active_environment_name(),
            self.root,
        )
        return self._tree

    def _apply_env_overrides(self) -> None:
        for override in self.env_overrides():
            set_path(self._tree, override.key, override.value)

    def file(
        self,
        path: Union[str, Path],
        *,
        ignore_not_found: bool = False,
        ignore_errors: bool = False,
        overwrite: bool = False,
    ) -> None:
        """Load one config file and merge it into the tree.

        Args:
            path: Absolute path of the file.
            ignore_not_found: Silently skip a missing file.
            ignore_errors: Silently skip any failure (including a missing file).
            overwrite: Replace the whole tree with the file's mapping instead
                of merging it.

        Raises:
            InvalidArgumentError: If ``path`` is not absolute.
            SourceNotFoundError: If the file is missing and not ignored.
            SourceLoadError: If the file cannot be parsed and errors are not ignored.
        """
        self.load_source(
            FileSource(
                Path(path),
                ignore_not_found=ignore_not_found,
                ignore_errors=ignore_errors,
                overwrite=overwrite,
            )
        )

    def load_source(self, source: FileSource) -> None:
        """Load ``source`` honouring its options. See ``file()``."""
        if not source.path.is_absolute():
            raise InvalidArgumentError(
                f"Only absolute paths are allowed: {source.path}",
                context={"path": str(source.path)},
            )

        try:
            with span("config.load.file", path=str(source.path)):
                data = read_source_file(source.path)
                if source.overwrite and isinstance(data, dict):
                    self._tree = data
                else:
                    self.merge(data)
        except SourceNotFoundError:
            if source.ignore_not_found or source.ignore_errors:
                logger.debug("Config file not found, skipping: %s", source.path)
                return
            raise
        except Exception as exc:
            if source.ignore_errors:
                logger.debug("Ignoring error while loading %s: %s", source.path, exc)
                return
            raise

    # ========== Accessors ==========

    def get(self, key: KeyPath, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get("db.host")
            'localhost'
            >>> manager.get("nonexistent.key", "fallback")
            'fallback'
        """
        return get_path(self._ensure_loaded(), key, default)

    __call__ = get

    def set(self, key: Union[KeyPath, Mapping[str, Any]], value: Any = _MISSING) -> Any:
        """Set a value by dot-notation key and return the previous value.

        Called with a single mapping, assigns its top-level keys (including its
        environment overrides, like ``assign``) and returns ``None``.
        """
        tree = self._ensure_loaded()
        if value is _MISSING and isinstance(key, Mapping):
            self._apply_layers(key, assign_into)
            return None
        return set_path(tree, key, None if value is _MISSING else value)

    def merge(self, obj: Any) -> None:
        """Deep-merge ``obj`` into the tree; non-mappings are ignored."""
        self._ensure_loaded()
        if isinstance(obj, Mapping):
            self._apply_layers(obj, deep_merge_into)

    def assign(self, obj: Any) -> None:
        """Assign ``obj``'s top-level keys into the tree; non-mappings are ignored."""
        self._ensure_loaded()
        if isinstance(obj, Mapping):
            self._apply_layers(obj, assign_into)

    def delete(self, key: str) -> None:
        """Remove a top-level key."""
        delete_key(self._ensure_loaded(), key)

    def read(self, key: KeyPath) -> Optional[bytes]:
        """Return the contents of the file whose path is stored at ``key``.

        The result is cached per key for the life of the manager, even if the
        value at ``key`` changes later. Missing or unreadable files give ``None``.
        """
        cache_key = key if isinstance(key, str) else ".".join(key)
        if cache_key in self._file_cache:
            return self._file_cache.get(cache_key)
        return self._file_cache.load(cache_key, self.get(key))

    def dump_config(self) -> Dict[str, Any]:
        """Return the live tree (not a copy)."""
        return self._ensure_loaded()

    # ========== Internals ==========

    def _apply_layers(self, obj: Mapping[str, Any], combine: Combine) -> None:
        tree = self._tree
        combine(tree, obj)
        env_key = f"{self.ENV_OVERRIDE_PREFIX}{self.active_environment_name()}"
        combine(tree, self._override(obj, env_key))
        if self.is_ci():
            combine(tree, self._override(obj, self.CI_OVERRIDE_KEY))

    @staticmethod
    def _override(obj: Mapping[str, Any], key: str) -> Any:
        if key not in obj:
            return None
        return resolve_value(obj, obj[key])


__all__ = ["ConfigManager"]
