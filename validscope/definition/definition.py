"""Validate Definitions

A ValidateDefinition is the compiled, reusable constraint graph for one
declared type. It is populated once by a builder (any callable taking the
definition under construction), sealed, and then applied to any number of
values without ever changing.

Usage:
    def user_schema(user: ValidateDefinition) -> None:
        user.value().match(lambda u: u is not None).description("must not be null")
        user.properties().validate("name", lambda name: name.value()
            .match(lambda n: len(n) > 0).description("must not be empty"))
        user.properties().validate("tags", lambda tags: tags.elements(
            lambda tag: tag.value().match(str.isidentifier).description("must be an identifier")))

    result = definition(user_schema).apply_to(user)

Container declarations (elements, keys, values, entries) are type-erased:
they only fire when the value at evaluation time has the matching shape.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Callable, Generic, NamedTuple, TypeVar, Union

from validscope.config import get_settings
from validscope.errors import definition_sealed, invalid_builder
from validscope.result import Fault, Result

from .constraint import Constraint
from .paths import entry_path, index_path, key_path, keyed_path
from .properties import PropertyValidator
from .value import ValueValidator

T = TypeVar("T")

Builder = Union[Callable[["ValidateDefinition"], Any], "ValidateDefinition"]
_TEXT_TYPES = (str, bytes, bytearray)


class Entry(NamedTuple):
    """One key-value pair of a mapping, as seen by `entries` definitions."""
    key: Any
    value: Any


def is_map_like(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_element_iterable(value: Any) -> bool:
    """Iterable values whose members are elements; text and mappings excluded."""
    return isinstance(value, Iterable) and not isinstance(value, (*_TEXT_TYPES, Mapping))


class ValidateDefinition(Generic[T]):
    """Composite node: value constraints, property validations, container
    delegations and included definitions for a single declared type."""

    def __init__(self, name: str | None = None):
        self.name = name
        self._value: ValueValidator[T] | None = None
        self._properties: PropertyValidator[T] | None = None
        self._elements: ValidateDefinition | None = None
        self._entries: ValidateDefinition[Entry] | None = None
        self._keys: ValidateDefinition | None = None
        self._values: ValidateDefinition | None = None
        self._includes: list[ValidateDefinition] = []
        self._sealed = False

    def __repr__(self) -> str:
        state = "sealed" if self._sealed else "open"
        return f"<ValidateDefinition {self.name or 'anonymous'} ({state})>"

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def value(self, block: Callable[[ValueValidator[T]], Any] | None = None):
        """Constraints on the value itself.

        With a block, runs it against the value scope and returns this
        definition; without one, returns the value scope for chaining.
        """
        self._check_open("value")
        if self._value is None:
            self._value = ValueValidator()
        if block is None:
            return self._value
        block(self._value)
        return self

    def properties(self, block: Callable[[PropertyValidator[T]], Any] | None = None):
        """Nested definitions for named members of a non-null value."""
        self._check_open("properties")
        if self._properties is None:
            self._properties = PropertyValidator()
        if block is None:
            return self._properties
        block(self._properties)
        return self

    def elements(self, builder: Builder | None = None):
        """Definition applied to every element of an iterable value."""
        return self._declare_container("_elements", "elements", builder)

    def entries(self, builder: Builder | None = None):
        """Definition applied to every `Entry(key, value)` of a mapping."""
        return self._declare_container("_entries", "entries", builder)

    def keys(self, builder: Builder | None = None):
        """Definition applied to every key of a mapping."""
        return self._declare_container("_keys", "keys", builder)

    def values(self, builder: Builder | None = None):
        """Definition applied to every value of a mapping."""
        return self._declare_container("_values", "values", builder)

    def include(self, other: ValidateDefinition) -> ValidateDefinition[T]:
        """Evaluate `other` against the same value at the same path.

        Held by reference, so `other` may still be under construction;
        this is how recursive schemas refer back to themselves.
        """
        self._check_open("include")
        if not isinstance(other, ValidateDefinition):
            raise invalid_builder(other)
        self._includes.append(other)
        return self

    def apply_builder(self, builder: Builder) -> ValidateDefinition[T]:
        """Populate this definition from a builder callable or include a definition."""
        if isinstance(builder, ValidateDefinition):
            return self.include(builder)
        if not callable(builder):
            raise invalid_builder(builder)
        self._check_open("apply_builder")
        builder(self)
        return self

    def seal(self) -> ValidateDefinition[T]:
        """Freeze this definition and every nested definition it owns."""
        if self._sealed:
            return self
        self._sealed = True
        if self._value is not None:
            self._value.seal()
        if self._properties is not None:
            self._properties.seal()
        for container in (self._elements, self._entries, self._keys, self._values):
            if container is not None:
                container.seal()
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def value_constraints(self) -> tuple[Constraint, ...]:
        return self._value.constraints if self._value is not None else ()

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def apply_to(self, value: T, path: str | None = None) -> Result[T]:
        """Evaluate the definition against `value`, rooted at `path`."""
        if path is None:
            path = get_settings().ROOT_PATH
        return Result.of(value, self.evaluate(value, path))

    def evaluate(self, value: Any, path: str) -> list[Fault]:
        """Collect faults in order: value, properties, containers, includes."""
        faults: list[Fault] = []
        if self._value is not None:
            faults.extend(self._value.evaluate(value, path))
        if self._properties is not None:
            faults.extend(self._properties.evaluate(value, path))

        if self._elements is not None and is_element_iterable(value):
            for index, element in enumerate(value):
                faults.extend(self._elements.evaluate(element, index_path(path, index)))

        if is_map_like(value):
            if self._entries is not None:
                for index, (key, member) in enumerate(value.items()):
                    faults.extend(self._entries.evaluate(Entry(key, member), entry_path(path, index)))
            if self._keys is not None:
                for index, key in enumerate(value.keys()):
                    faults.extend(self._keys.evaluate(key, key_path(path, index)))
            if self._values is not None:
                for key, member in value.items():
                    faults.extend(self._values.evaluate(member, keyed_path(path, key)))

        for included in self._includes:
            faults.extend(included.evaluate(value, path))
        return faults

    # ------------------------------------------------------------------

    def _declare_container(self, slot: str, operation: str, builder: Builder | None):
        self._check_open(operation)
        container = getattr(self, slot)
        if container is None:
            container = ValidateDefinition(name=operation)
            setattr(self, slot, container)
        if builder is None:
            return container
        container.apply_builder(builder)
        return self

    def _check_open(self, operation: str) -> None:
        if self._sealed:
            raise definition_sealed(operation)


def build_definition(builder: Builder, name: str | None = None) -> ValidateDefinition:
    """Run `builder` once against a fresh definition and seal it.

    A ValidateDefinition passed in place of a builder is returned as-is.
    """
    if isinstance(builder, ValidateDefinition):
        return builder
    if not callable(builder):
        raise invalid_builder(builder)
    return ValidateDefinition(name=name or _builder_name(builder)).apply_builder(builder).seal()


def _builder_name(builder: Callable) -> str | None:
    return getattr(builder, "__qualname__", None) or getattr(builder, "__name__", None)
