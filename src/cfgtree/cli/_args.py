"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --root flag for the config root directory."""
    parser.add_argument(
        "--root",
        type=str,
        help="Directory holding config files (default: $CFGTREE_ROOT or the current directory)",
    )


__all__ = ["add_json_flag", "add_root_flag"]
