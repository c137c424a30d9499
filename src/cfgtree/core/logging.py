from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> logging.Handler:
    """Install one cfgtree handler on the ``cfgtree`` logger.

    Logs go to ``log_path`` when given, otherwise to stderr (stdout stays clean
    for command output). Calling again replaces the previous handler.
    """
    global _HANDLER

    logger = logging.getLogger("cfgtree")
    logger.setLevel(_level_from_name(level))

    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
        _HANDLER.close()
        _HANDLER = None

    if log_path is not None:
        resolved = Path(log_path).resolve()
        resolved.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(resolved, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)

    _HANDLER = handler
    return handler


def reset_logging_for_tests() -> None:
    """Test-only: remove the handler installed by ``configure_logging``."""
    global _HANDLER
    logger = logging.getLogger("cfgtree")
    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
        _HANDLER.close()
    _HANDLER = None
    logger.setLevel(logging.NOTSET)


__all__ = ["configure_logging", "reset_logging_for_tests", "LOG_FORMAT"]
