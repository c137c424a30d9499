"""
cfgtree config env command.

SUMMARY: Show the active environment and its predicates
"""

from __future__ import annotations

import argparse

from cfgtree.cli import OutputFormatter, add_json_flag
from cfgtree.core.config import EnvironmentResolver

SUMMARY = "Show the active environment and its predicates"


def register_args(parser: argparse.ArgumentParser) -> None:
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    resolver = EnvironmentResolver()

    payload = {
        "environment": resolver.active_environment_name(),
        "isProduction": resolver.is_production(),
        "isStaging": resolver.is_staging(),
        "isProductionLike": resolver.is_production_like(),
        "isTest": resolver.is_test(),
        "isDev": resolver.is_dev(),
        "isCI": resolver.is_ci(),
    }

    if formatter.json_mode:
        formatter.json_output(payload)
        return 0

    formatter.text(f"Environment: {payload['environment']}")
    for key, value in payload.items():
        if key != "environment":
            formatter.text_kv(key, "yes" if value else "no")
    return 0
