from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cfgtree.core.config import ConfigManager, FileContentCache, get_default_manager, set_default_manager


def test_load_caches_contents_by_key(tmp_path: Path) -> None:
    first = tmp_path / "first.txt"
    second = tmp_path / "second.txt"
    first.write_bytes(b"one")
    second.write_bytes(b"two")

    cache = FileContentCache()
    assert cache.load("tls.cert", str(first)) == b"one"
    # Same key, different path: the cached entry wins
    assert cache.load("tls.cert", str(second)) == b"one"
    assert cache.get("tls.cert") == b"one"
    assert "tls.cert" in cache
    assert len(cache) == 1
    assert list(cache) == ["tls.cert"]


def test_falsy_path_caches_none() -> None:
    cache = FileContentCache()
    assert cache.load("missing", None) is None
    assert cache.load("empty", "") is None
    assert "missing" in cache and "empty" in cache


def test_unreadable_file_caches_none_and_logs(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    cache = FileContentCache()
    with caplog.at_level(logging.ERROR, logger="cfgtree"):
        assert cache.load("key", str(tmp_path / "absent.bin")) is None
    assert "key" in cache
    assert "absent.bin" in caplog.text


def test_default_manager_registry(tmp_path: Path) -> None:
    first = get_default_manager()
    assert get_default_manager() is first

    custom = ConfigManager(tmp_path)
    set_default_manager(custom)
    assert get_default_manager() is custom


def test_nul_byte_path_caches_none_and_logs(caplog: pytest.LogCaptureFixture) -> None:
    mgr = ConfigManager()
    mgr.set("tls.cert", "/tmp/a\x00b")
    with caplog.at_level(logging.ERROR, logger="cfgtree"):
        assert mgr.read("tls.cert") is None
    assert "tls.cert" in mgr.file_cache
    assert "tls.cert" in caplog.text
