from __future__ import annotations

from cfgtree.core.computed import Computed
from cfgtree.core.utils.keypath import delete_key, get_path, set_path, split_path


def test_split_path_accepts_string_and_sequence() -> None:
    assert split_path("a.b.c") == ["a", "b", "c"]
    assert split_path(["a", 0, "c"]) == ["a", "0", "c"]


def test_get_path_returns_nested_value_and_default() -> None:
    tree = {"db": {"host": "localhost", "replicas": [{"host": "r1"}]}}
    assert get_path(tree, "db.host") == "localhost"
    assert get_path(tree, "db.replicas.0.host") == "r1"
    assert get_path(tree, "db.port") is None
    assert get_path(tree, "db.port", 5432) == 5432
    assert get_path(tree, "db.host.length", "nope") == "nope"
    assert get_path(tree, "db.replicas.5", "nope") == "nope"


def test_get_path_returns_stored_none_instead_of_default() -> None:
    assert get_path({"a": None}, "a", "fallback") is None


def test_get_path_evaluates_computed_with_owner() -> None:
    tree = {"db": {"host": "h", "port": 1, "url": Computed(lambda o: f"{o['host']}:{o['port']}")}}
    assert get_path(tree, "db.url") == "h:1"
    tree["db"]["port"] = 2
    assert get_path(tree, "db.url") == "h:2"


def test_set_path_creates_intermediates_and_returns_previous() -> None:
    tree: dict = {}
    assert set_path(tree, "a.b.c", 1) is None
    assert tree == {"a": {"b": {"c": 1}}}
    assert set_path(tree, "a.b.c", 2) == 1
    assert tree["a"]["b"]["c"] == 2


def test_set_path_replaces_scalar_intermediate() -> None:
    tree = {"a": 5}
    set_path(tree, "a.b", 1)
    assert tree == {"a": {"b": 1}}


def test_set_path_indexes_into_lists() -> None:
    tree = {"hosts": ["a", "b"]}
    assert set_path(tree, "hosts.1", "c") == "b"
    set_path(tree, "hosts.3", "d")
    assert tree["hosts"] == ["a", "c", None, "d"]


def test_set_path_delegates_to_computed_setter() -> None:
    store = {}
    tree = {"name": Computed(lambda o: store.get("name"), lambda o, v: store.update(name=v))}
    set_path(tree, "name", "x")
    assert store == {"name": "x"}
    assert isinstance(tree["name"], Computed)
    assert get_path(tree, "name") == "x"


def test_set_path_replaces_read_only_computed() -> None:
    tree = {"name": Computed(lambda o: "fixed")}
    assert set_path(tree, "name", "x") == "fixed"
    assert tree["name"] == "x"


def test_set_path_replaces_list_for_non_index_segment() -> None:
    tree = {"hosts": ["a"]}
    set_path(tree, "hosts.first.name", "x")
    assert tree["hosts"] == {"first": {"name": "x"}}


def test_delete_key_is_top_level_only() -> None:
    tree = {"a": {"b": 1}, "c": 2}
    delete_key(tree, "a.b")
    assert tree == {"a": {"b": 1}, "c": 2}
    delete_key(tree, "a")
    assert tree == {"c": 2}
    delete_key(tree, "missing")


def test_non_ascii_digit_segments_are_not_list_indices() -> None:
    tree = {"hosts": ["a", "b"]}
    assert get_path(tree, "hosts.²", "fallback") == "fallback"
    assert get_path(tree, "hosts.1") == "b"

    set_path(tree, "hosts.²", "x")
    assert tree["hosts"] == {"²": "x"}
