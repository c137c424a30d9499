"""
cfgtree config sources command.

SUMMARY: List configuration sources in load order

Shows each default config file (lowest precedence first) with whether it
exists, followed by the ``CFG__`` environment overrides that would be applied.
"""

from __future__ import annotations

import argparse

from cfgtree.cli import OutputFormatter, add_json_flag, add_root_flag, get_manager

SUMMARY = "List configuration sources in load order"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)
    add_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        manager = get_manager(args)
        files = [
            {"path": str(source.path), "exists": source.exists}
            for source in manager.default_sources()
        ]
        overrides = [
            {"variable": o.variable, "key": o.key, "value": o.value}
            for o in manager.env_overrides()
        ]
    except Exception as e:
        formatter.error(e, error_code="config_sources_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "root": str(manager.root),
                "environment": manager.active_environment_name(),
                "files": files,
                "envOverrides": overrides,
            }
        )
        return 0

    formatter.text(f"Root: {manager.root}")
    formatter.text(f"Environment: {manager.active_environment_name()}")
    formatter.text("")
    formatter.text("Files (lowest precedence first):")
    for entry in files:
        marker = "+" if entry["exists"] else "-"
        formatter.text(f"  {marker} {entry['path']}")
    formatter.text("")
    if overrides:
        formatter.text("Environment overrides:")
        for o in overrides:
            formatter.text_kv(o["key"], f"{o['value']!r} ({o['variable']})")
    else:
        formatter.text("Environment overrides: none")
    return 0
