"""
cfgtree config read command.

SUMMARY: Print the contents of the file named by a config key
"""

from __future__ import annotations

import argparse
import sys

from cfgtree.cli import OutputFormatter, add_root_flag, get_manager

SUMMARY = "Print the contents of the file named by a config key"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("key", help="Config key holding a file path (e.g., 'tls.certFile')")
    add_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter()
    content = get_manager(args).read(args.key)
    if content is None:
        formatter.error(KeyError(args.key), f"No readable file at config key: {args.key}")
        return 1

    sys.stdout.buffer.write(content)
    sys.stdout.buffer.flush()
    return 0
