"""Value scope: constraints evaluated against the value itself."""
from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from validscope.errors import definition_sealed
from validscope.matchers import Matcher
from validscope.result import Fault

from .constraint import Constraint, ConstraintHandle

T = TypeVar("T")


class ValueValidator(Generic[T]):
    """Holds the constraints declared for one value.

    Every constraint is evaluated in registration order, without
    short-circuiting, so a single pass reports all violations.
    """

    def __init__(self):
        self._constraints: list[Constraint[T]] = []
        self._sealed = False

    @property
    def constraints(self) -> tuple[Constraint[T], ...]:
        return tuple(self._constraints)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def match(self, predicate: Callable[[T], Any]) -> ConstraintHandle[T]:
        """Register a predicate; describe it through the returned handle."""
        self._check_open("match")
        constraint = Constraint(predicate)
        self._constraints.append(constraint)
        return ConstraintHandle(constraint, self)

    def expect(self, *matchers: Matcher) -> ValueValidator[T]:
        """Register pre-built matchers, each as its own described constraint."""
        self._check_open("expect")
        for matcher in matchers:
            self._constraints.append(Constraint(matcher.test, matcher.description))
        return self

    def seal(self) -> None:
        self._sealed = True

    def evaluate(self, value: T, path: str) -> list[Fault]:
        return [Fault(path, c.description, value) for c in self._constraints if not c.holds_for(value)]

    def _check_open(self, operation: str) -> None:
        if self._sealed:
            raise definition_sealed(operation)
