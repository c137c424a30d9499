"""
cfgtree config show command.

SUMMARY: Show current configuration

Displays the merged configuration from the config files, private overrides
and ``CFG__`` environment variables. Supports filtering by key and multiple
output formats.
"""

from __future__ import annotations

import argparse
import sys

from cfgtree.cli import OutputFormatter, add_json_flag, add_root_flag, get_manager
from cfgtree.core.computed import materialize
from cfgtree.core.utils.io import dump_yaml_string

SUMMARY = "Show current configuration"

_MISSING = object()


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "key",
        nargs="?",
        help="Specific configuration key to show (e.g., 'db.host')",
    )
    parser.add_argument(
        "--format",
        choices=["json", "yaml", "table"],
        default="table",
        help="Output format (default: table)",
    )
    add_json_flag(parser)
    add_root_flag(parser)


def _format_value(value, indent: int = 0) -> str:
    """Format a value for table display."""
    prefix = "  " * indent
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = []
        for k, v in value.items():
            formatted = _format_value(v, indent + 1)
            if "\n" in formatted or (isinstance(v, dict) and v):
                lines.append(f"{prefix}{k}:")
                lines.append(formatted)
            else:
                lines.append(f"{prefix}{k}: {formatted}")
        return "\n".join(lines)
    elif isinstance(value, list):
        if not value:
            return "[]"
        if all(isinstance(v, (str, int, float, bool)) for v in value):
            return f"[{', '.join(str(v) for v in value)}]"
        lines = []
        for v in value:
            formatted = _format_value(v, indent + 1)
            lines.append(f"{prefix}- {formatted.strip()}")
        return "\n".join(lines)
    else:
        return str(value)


def main(args: argparse.Namespace) -> int:
    """Show configuration - delegates to ConfigManager."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        manager = get_manager(args)
        output_format = "json" if args.json else args.format

        if args.key:
            value = manager.get(args.key, _MISSING)
            if value is _MISSING:
                formatter.error(KeyError(args.key), f"Key not found: {args.key}", error_code="key_not_found")
                return 1
            value = materialize(value)

            if output_format == "json":
                formatter.json_output({args.key: value})
            elif output_format == "yaml":
                # Nested mapping so dot-notation keys remain readable
                formatter.text(dump_yaml_string(_nest_key(args.key, value)).rstrip())
            else:
                formatter.text(f"{args.key}:")
                formatter.text(_format_value(value, indent=1))
            return 0

        config_data = materialize(manager.dump_config())

        if output_format == "json":
            formatter.json_output(config_data)
        elif output_format == "yaml":
            formatter.text(dump_yaml_string(config_data).rstrip())
        else:
            formatter.text(f"Configuration ({manager.active_environment_name()})")
            formatter.text("=" * 60)
            formatter.text("")
            for section in sorted(config_data):
                formatter.text(f"[{section}]")
                value = config_data[section]
                if isinstance(value, dict):
                    formatter.text(_format_value(value, 1))
                else:
                    formatter.text(f"  {_format_value(value)}")
                formatter.text("")

        return 0

    except Exception as e:
        formatter.error(e, error_code="config_show_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
