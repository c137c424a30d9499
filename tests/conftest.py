from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

# Keep the repository free of Python bytecode and __pycache__ artifacts during tests.
sys.dont_write_bytecode = True

TESTS_ROOT = Path(__file__).resolve().parent
REPO_ROOT = TESTS_ROOT.parent
SRC_ROOT = REPO_ROOT / "src"

# Make src/ importable as 'cfgtree'
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from cfgtree.core.config import clear_default_manager  # noqa: E402
from cfgtree.core.logging import reset_logging_for_tests  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test from an empty directory with no config-related env vars.

    The process-wide default manager and the cfgtree log handler are reset
    before and after every test.
    """
    for name in list(os.environ):
        if name.startswith("CFG__") or name in ("APP_ENV", "CI", "CFGTREE_ROOT"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_default_manager()
    reset_logging_for_tests()
    yield tmp_path
    clear_default_manager()
    reset_logging_for_tests()


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a YAML (or JSON) config file under ``tmp_path`` and return its path."""
    import json

    import yaml

    def _write(relpath: str, data) -> Path:
        path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix == ".json":
            path.write_text(json.dumps(data), encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(data), encoding="utf-8")
        return path

    return _write
