"""Constraints: a predicate plus the description reported when it fails."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar

from validscope.errors import definition_sealed, description_already_set

if TYPE_CHECKING:
    from .value import ValueValidator

T = TypeVar("T")


class Constraint(Generic[T]):
    """Atomic unit of validation.

    The description may be assigned exactly once; it stays empty when the
    caller never sets it.
    """
    __slots__ = ("predicate", "_description", "_described")

    def __init__(self, predicate: Callable[[T], Any], description: str | None = None):
        self.predicate = predicate
        self._description = description or ""
        self._described = description is not None

    @property
    def description(self) -> str:
        return self._description

    def describe(self, text: str) -> None:
        if self._described:
            raise description_already_set(self._description)
        self._description, self._described = text, True

    def holds_for(self, value: T) -> bool:
        return bool(self.predicate(value))

    def __repr__(self) -> str:
        return f"Constraint(description={self._description!r})"


class ConstraintHandle(Generic[T]):
    """Returned by `ValueValidator.match` to attach the description.

    Usage:
        value.match(lambda v: v is not None).description("must not be null")
    """
    __slots__ = ("constraint", "_owner")

    def __init__(self, constraint: Constraint[T], owner: ValueValidator[T]):
        self.constraint, self._owner = constraint, owner

    def description(self, text: str) -> ValueValidator[T]:
        """Set the constraint description and return the owning value scope."""
        if self._owner.sealed:
            raise definition_sealed("description")
        self.constraint.describe(text)
        return self._owner
