"""Shared CLI utilities."""
from __future__ import annotations

import argparse
import os
from pathlib import Path

from cfgtree.core.config import ConfigManager

ROOT_ENV_VAR = "CFGTREE_ROOT"


def get_root(args: argparse.Namespace) -> Path:
    """Resolve the config root: ``--root``, then ``$CFGTREE_ROOT``, then cwd."""
    explicit = getattr(args, "root", None)
    if explicit:
        return Path(explicit).expanduser().resolve()
    from_env = os.environ.get(ROOT_ENV_VAR)
    if from_env:
        return Path(from_env).expanduser().resolve()
    return Path.cwd()


def get_manager(args: argparse.Namespace) -> ConfigManager:
    """Build a ``ConfigManager`` for the command's root."""
    return ConfigManager(get_root(args))


__all__ = ["ROOT_ENV_VAR", "get_root", "get_manager"]
