"""Computed configuration values.

A ``Computed`` sits in the configuration tree in place of a literal value and
produces its value when read. Merging and assignment move the ``Computed``
object itself, so the value keeps being derived after it lands in the tree.

Example:
    >>> tree = {"host": "db", "port": 5432}
    >>> tree["dsn"] = Computed(lambda owner: f"{owner['host']}:{owner['port']}")
    >>> materialize(tree)["dsn"]
    'db:5432'
"""
from __future__ import annotations

from typing import Any, Callable, Mapping, MutableMapping, Optional

Getter = Callable[[Mapping[str, Any]], Any]
Setter = Callable[[MutableMapping[str, Any], Any], None]


class Computed:
    """Tree value backed by a getter (and optionally a setter).

    The getter receives the mapping that holds the value, so sibling keys are
    reachable without a reference to the whole tree.
    """

    __slots__ = ("getter", "setter")

    def __init__(self, getter: Getter, setter: Optional[Setter] = None) -> None:
        if not callable(getter):
            raise TypeError("Computed getter must be callable")
        self.getter = getter
        self.setter = setter

    @property
    def writable(self) -> bool:
        return self.setter is not None

    def resolve(self, owner: Mapping[str, Any]) -> Any:
        return self.getter(owner)

    def assign(self, owner: MutableMapping[str, Any], value: Any) -> None:
        if self.setter is None:
            raise AttributeError("Computed value has no setter")
        self.setter(owner, value)

    def __repr__(self) -> str:
        name = getattr(self.getter, "__name__", type(self.getter).__name__)
        return f"Computed({name}{', writable' if self.writable else ''})"


def computed(getter: Getter) -> Computed:
    """Decorator form: ``@computed`` turns a getter function into a ``Computed``."""
    return Computed(getter)


def resolve_value(owner: Mapping[str, Any], value: Any) -> Any:
    """Evaluate ``value`` if it is a ``Computed`` held by ``owner``."""
    if isinstance(value, Computed):
        return value.resolve(owner)
    return value


def materialize(value: Any) -> Any:
    """Return a plain deep copy of ``value`` with every ``Computed`` evaluated.

    Used for output (CLI, JSON/YAML dumps); the live tree is left untouched.
    """
    if isinstance(value, dict):
        return {key: materialize(resolve_value(value, item)) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [materialize(item) for item in value]
    return value


__all__ = ["Computed", "computed", "resolve_value", "materialize"]
