"""
cfgtree CLI package.

Commands are auto-discovered from subfolders (``config/``). Framework
utilities for building commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._output import OutputFormatter, format_json
from ._args import add_json_flag, add_root_flag
from ._utils import get_manager, get_root

__all__ = [
    "OutputFormatter",
    "format_json",
    "add_json_flag",
    "add_root_flag",
    "get_manager",
    "get_root",
]
