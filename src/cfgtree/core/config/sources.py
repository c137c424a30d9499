"""Configuration sources: file descriptors, file parsing and env overrides.

File sources are declarative data only (YAML or JSON). The default file
sequence, lowest precedence first, is::

    <root>/config.yaml
    <root>/config.<env>.yaml
    <root>/config.CI.yaml              (CI only)
    <root>/private/config.yaml
    <root>/private/config.<env>.yaml
    <root>/private/config.CI.yaml      (CI only)

Each name may also exist as ``.yml`` or ``.json``; the first existing
candidate wins (``.yaml`` > ``.yml`` > ``.json``).

Environment overrides use ``CFG__`` variables: ``CFG__DB__MAX_POOL=5`` sets
``db.maxPool`` to ``"5"``. A value tagged ``@JSON:`` is parsed as JSON.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, List, Mapping

from cfgtree.core.exceptions import JSONParseError, SourceLoadError, SourceNotFoundError
from cfgtree.core.utils.io import parse_json_value, read_json, read_yaml
from cfgtree.core.utils.text import camel_case

logger = logging.getLogger(__name__)

CONFIG_STEM = "config"
CI_NAME = "CI"
PRIVATE_DIR = "private"
CONFIG_SUFFIXES = (".yaml", ".yml", ".json")

ENV_PREFIX = "CFG__"
ENV_SEPARATOR = "__"
JSON_TAG = "@JSON:"


@dataclass(frozen=True)
class FileSource:
    """One configuration file plus its load options."""

    path: Path
    ignore_not_found: bool = False
    ignore_errors: bool = False
    overwrite: bool = False

    @property
    def exists(self) -> bool:
        return self.path.is_file()


@dataclass(frozen=True)
class EnvOverride:
    """A config key/value derived from one ``CFG__`` environment variable."""

    variable: str
    key: str
    value: Any


def resolve_config_file(directory: Path, stem: str) -> Path:
    """Return the first existing ``<stem><suffix>`` in ``directory``.

    Falls back to the ``.yaml`` name when none exists so callers still get a
    concrete path to report as missing.
    """
    for suffix in CONFIG_SUFFIXES:
        candidate = directory / f"{stem}{suffix}"
        if candidate.is_file():
            return candidate
    return directory / f"{stem}{CONFIG_SUFFIXES[0]}"


def default_sources(root: Path, env_name: str, is_ci: bool) -> List[FileSource]:
    """Build the default file sources in load order (lowest precedence first)."""
    stems = [CONFIG_STEM, f"{CONFIG_STEM}.{env_name}"]
    if is_ci:
        stems.append(f"{CONFIG_STEM}.{CI_NAME}")

    sources: List[FileSource] = []
    for directory in (root, root / PRIVATE_DIR):
        for stem in stems:
            sources.append(
                FileSource(resolve_config_file(directory, stem), ignore_not_found=True)
            )
    return sources


def read_source_file(path: Path) -> Any:
    """Load and parse one configuration file.

    Returns the parsed document; an empty document is ``{}``.

    Raises:
        SourceNotFoundError: If ``path`` does not exist.
        SourceLoadError: If the suffix is unsupported or the file cannot be
            read or parsed.
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(
            f"Config file not found: {path}", context={"path": str(path)}
        )

    suffix = path.suffix.lower()
    try:
        if suffix in (".yaml", ".yml"):
            return read_yaml(path, default={}, raise_on_error=True)
        if suffix == ".json":
            return read_json(path, raise_on_error=True)
    except Exception as exc:
        raise SourceLoadError(
            f"Failed to load config file {path}: {exc}",
            context={"path": str(path), "format": suffix.lstrip(".")},
        ) from exc

    raise SourceLoadError(
        f"Unsupported config file format: {path.suffix or '<none>'}",
        context={"path": str(path)},
    )


def env_key_to_path(variable: str, prefix: str = ENV_PREFIX) -> str:
    """Derive the dotted config key for a prefixed environment variable.

    Example:
        >>> env_key_to_path("CFG__FOO__BAR_BAZ")
        'foo.barBaz'
    """
    raw = variable[len(prefix):]
    return ".".join(camel_case(segment) for segment in raw.split(ENV_SEPARATOR))


def decode_env_value(variable: str, value: str, json_tag: str = JSON_TAG) -> Any:
    """Return the config value for an environment variable's raw string.

    Tagged values are parsed as JSON. When parsing fails the error is logged
    and the text after the tag is returned unparsed.
    """
    if not value.startswith(json_tag):
        return value
    payload = value[len(json_tag):]
    try:
        return parse_json_value(payload, source=variable)
    except JSONParseError as exc:
        logger.error("Error while parsing JSON value of env variable %s: %s", variable, exc)
        return payload


def iter_env_overrides(
    environ: Mapping[str, str],
    prefix: str = ENV_PREFIX,
    json_tag: str = JSON_TAG,
) -> Iterator[EnvOverride]:
    """Yield overrides for every ``prefix`` variable, sorted by variable name."""
    for variable in sorted(environ.keys()):
        if not variable.startswith(prefix):
            continue
        key = env_key_to_path(variable, prefix)
        if not key.strip("."):
            logger.warning("Ignoring env variable %s: it does not name a config key", variable)
            continue
        yield EnvOverride(variable, key, decode_env_value(variable, environ[variable], json_tag))


__all__ = [
    "FileSource",
    "EnvOverride",
    "CONFIG_STEM",
    "PRIVATE_DIR",
    "ENV_PREFIX",
    "JSON_TAG",
    "resolve_config_file",
    "default_sources",
    "read_source_file",
    "env_key_to_path",
    "decode_env_value",
    "iter_env_overrides",
]
