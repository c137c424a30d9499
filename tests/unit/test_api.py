from __future__ import annotations

from pathlib import Path

import pytest

import cfgtree
from cfgtree.core.config import ConfigManager, get_default_manager, set_default_manager


def test_module_api_reads_cwd_config(write_config) -> None:
    write_config("config.yaml", {"db": {"host": "localhost"}})
    assert cfgtree.get("db.host") == "localhost"
    assert cfgtree.get("db.port", 5432) == 5432


def test_module_api_shares_one_manager(write_config) -> None:
    assert cfgtree.set("a.b", 1) is None
    assert cfgtree.set("a.b", 2) == 1
    cfgtree.merge({"a": {"c": 3}})
    assert cfgtree.dump_config() == {"a": {"b": 2, "c": 3}}
    assert cfgtree.dump_config() is get_default_manager().dump_config()

    cfgtree.assign({"a": {"d": 4}})
    assert cfgtree.get("a") == {"d": 4}

    cfgtree.delete("a")
    assert cfgtree.get("a") is None


def test_module_set_forms() -> None:
    cfgtree.set({"x": 1, "y": {"z": 2}})
    assert cfgtree.get("y.z") == 2
    cfgtree.set("flag")
    assert "flag" in cfgtree.dump_config()


def test_module_file_and_read(tmp_path: Path, write_config) -> None:
    extra = write_config("extra.yaml", {"key": {"path": str(tmp_path / "key.pem")}})
    (tmp_path / "key.pem").write_bytes(b"KEY")

    cfgtree.file(extra)
    assert cfgtree.read("key.path") == b"KEY"

    with pytest.raises(cfgtree.InvalidArgumentError):
        cfgtree.file("extra.yaml")
    cfgtree.file(tmp_path / "missing.yaml", ignore_not_found=True)


def test_module_uses_registered_manager(tmp_path: Path, write_config) -> None:
    write_config("elsewhere/config.yaml", {"where": "elsewhere"})
    set_default_manager(ConfigManager(tmp_path / "elsewhere"))
    assert cfgtree.get("where") == "elsewhere"


def test_module_environment_predicates(monkeypatch: pytest.MonkeyPatch) -> None:
    assert cfgtree.env() == "development"
    assert cfgtree.is_dev()
    assert cfgtree.is_development()

    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("CI", "1")
    assert cfgtree.get_env() == "production"
    assert cfgtree.active_environment_name() == "production"
    assert cfgtree.is_production() and cfgtree.is_prod()
    assert cfgtree.is_production_like() and cfgtree.is_prod_like()
    assert not cfgtree.is_staging()
    assert not cfgtree.is_test()
    assert not cfgtree.is_dev()
    assert cfgtree.is_ci()


def test_computed_exported() -> None:
    cfgtree.merge({"a": 2, "b": cfgtree.Computed(lambda o: o["a"] * 10)})
    assert cfgtree.get("b") == 20


def test_errors_share_base_class() -> None:
    for exc_type in (
        cfgtree.InvalidArgumentError,
        cfgtree.SourceNotFoundError,
        cfgtree.SourceLoadError,
        cfgtree.FileReadError,
        cfgtree.JSONParseError,
    ):
        assert issubclass(exc_type, cfgtree.CfgtreeError)

    err = cfgtree.SourceLoadError("boom", context={"path": "/x"})
    assert err.to_json_error() == {
        "message": "boom",
        "code": "SourceLoadError",
        "context": {"path": "/x"},
    }
