from __future__ import annotations

from pathlib import Path

import pytest

from cfgtree.core.exceptions import FileReadError, JSONParseError
from cfgtree.core.utils.io import (
    dump_yaml_string,
    parse_json_value,
    read_bytes,
    read_json,
    read_yaml,
)


def test_read_yaml_returns_default_for_missing_and_empty(tmp_path: Path) -> None:
    assert read_yaml(tmp_path / "missing.yaml", default={}) == {}
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert read_yaml(empty, default={"x": 1}) == {"x": 1}


def test_read_yaml_raises_on_invalid_when_requested(tmp_path: Path) -> None:
    bad = tmp_path / "bad.yaml"
    bad.write_text("a: [1, 2\n", encoding="utf-8")
    assert read_yaml(bad, default="d") == "d"
    with pytest.raises(Exception):
        read_yaml(bad, raise_on_error=True)


def test_read_json(tmp_path: Path) -> None:
    path = tmp_path / "c.json"
    path.write_text('{"a": {"b": [1, 2]}}', encoding="utf-8")
    assert read_json(path) == {"a": {"b": [1, 2]}}
    assert read_json(tmp_path / "missing.json", default=None) is None


def test_parse_json_value_wraps_errors() -> None:
    assert parse_json_value('{"a": 1}') == {"a": 1}
    with pytest.raises(JSONParseError) as excinfo:
        parse_json_value("{nope", source="CFG__X")
    assert excinfo.value.context == {"source": "CFG__X"}
    assert isinstance(excinfo.value, ValueError)


def test_read_bytes_raises_file_read_error(tmp_path: Path) -> None:
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01")
    assert read_bytes(path) == b"\x00\x01"

    with pytest.raises(FileReadError) as excinfo:
        read_bytes(tmp_path / "missing.bin")
    assert excinfo.value.context["path"].endswith("missing.bin")
    assert excinfo.value.to_json_error()["code"] == "FileReadError"


def test_dump_yaml_string_sorts_keys() -> None:
    assert dump_yaml_string({"b": 1, "a": 2}) == "a: 2\nb: 1\n"


def test_read_bytes_wraps_invalid_path(tmp_path: Path) -> None:
    with pytest.raises(FileReadError) as excinfo:
        read_bytes(str(tmp_path / "a\x00b"))
    assert "null" in excinfo.value.context["reason"]
