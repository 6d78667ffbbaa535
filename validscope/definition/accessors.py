"""Property accessors.

An accessor reads one named member off a non-null owner. The name doubles
as the path segment for faults found beneath it.
"""
from __future__ import annotations

from collections.abc import Hashable, Mapping
from dataclasses import dataclass
from typing import Any, Callable

from validscope.errors import invalid_accessor


@dataclass(frozen=True, slots=True)
class Attribute:
    """Read an attribute; a missing attribute raises AttributeError."""
    name: str

    def read(self, owner: Any) -> Any:
        return getattr(owner, self.name)


@dataclass(frozen=True, slots=True)
class Item:
    """Read a key off a mapping; an absent key reads as None."""
    name: Hashable

    def read(self, owner: Any) -> Any:
        if isinstance(owner, Mapping):
            return owner.get(self.name)
        return owner[self.name]


@dataclass(frozen=True, slots=True)
class Accessor:
    """Arbitrary getter paired with the name used in fault paths."""
    name: str
    getter: Callable[[Any], Any]

    def read(self, owner: Any) -> Any:
        return self.getter(owner)


PropertyAccessor = Attribute | Item | Accessor


def resolve_accessor(accessor: Any) -> PropertyAccessor:
    """Normalize the accessor forms accepted by `PropertyValidator.validate`."""
    if isinstance(accessor, (Attribute, Item, Accessor)):
        return accessor
    if isinstance(accessor, str):
        if not accessor:
            raise invalid_accessor(accessor)
        return Attribute(accessor)
    if isinstance(accessor, property) and accessor.fget is not None:
        return Attribute(accessor.fget.__name__)
    raise invalid_accessor(accessor)
