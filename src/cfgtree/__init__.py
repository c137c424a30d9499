"""
cfgtree - layered configuration for Python processes

Loads ``config.yaml``, ``config.<env>.yaml``, CI and private overrides and
``CFG__*`` environment variables into one tree, and exposes dotted-key
read/write access to it.
"""

__version__ = "1.0.0"

from cfgtree.api import (  # noqa: E402
    active_environment_name,
    assign,
    delete,
    dump_config,
    env,
    file,
    get,
    get_env,
    is_ci,
    is_dev,
    is_development,
    is_prod,
    is_prod_like,
    is_production,
    is_production_like,
    is_staging,
    is_test,
    merge,
    read,
    set,
)
from cfgtree.core.computed import Computed, computed  # noqa: E402
from cfgtree.core.config import ConfigManager, EnvironmentResolver  # noqa: E402
from cfgtree.core.exceptions import (  # noqa: E402
    CfgtreeError,
    FileReadError,
    InvalidArgumentError,
    JSONParseError,
    SourceLoadError,
    SourceNotFoundError,
)

__all__ = [
    "__version__",
    "ConfigManager",
    "EnvironmentResolver",
    "Computed",
    "computed",
    "CfgtreeError",
    "InvalidArgumentError",
    "SourceNotFoundError",
    "SourceLoadError",
    "FileReadError",
    "JSONParseError",
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
