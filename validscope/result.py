"""Validation Results

A Result pairs the validated value with the ordered faults collected while
evaluating a definition against it. An empty fault sequence is the only
success signal.

Fault Format:
{
    "path": "this.addresses[0].street",
    "description": "must not be blank",
    "value": "  "
}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from validscope.errors import ValidationFailed

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Fault:
    """One recorded constraint violation.

    - path: location of the offending value (e.g., "this.users[2].name")
    - description: description registered with the failing constraint
    - value: the value the constraint was evaluated against
    """
    path: str
    description: str
    value: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "description": self.description, "value": self.value}


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """Outcome of applying a definition to one value.

    Continuations branch on the outcome and return the result itself so
    they can be chained:

        validate(user, user_schema) \\
            .success(lambda value: save(value)) \\
            .fail(lambda value, faults: report(faults))
    """
    value: T
    faults: tuple[Fault, ...] = ()

    def success(self, block: Callable[[T], Any]) -> Result[T]:
        """Invoke `block(value)` if there are no faults."""
        if not self.faults: block(self.value)
        return self

    def fail(self, block: Callable[[T, tuple[Fault, ...]], Any]) -> Result[T]:
        """Invoke `block(value, faults)` if there are faults."""
        if self.faults: block(self.value, self.faults)
        return self

    @property
    def first_fault(self) -> Fault | None: return self.faults[0] if self.faults else None

    @property
    def field_faults(self) -> dict[str, list[Fault]]:
        """Group faults by path, in first-seen order."""
        grouped: dict[str, list[Fault]] = {}
        for fault in self.faults: grouped.setdefault(fault.path, []).append(fault)
        return grouped

    def faults_at(self, path: str) -> list[Fault]:
        return [f for f in self.faults if f.path == path]

    def raise_for_faults(self, message: str = "Validation failed") -> Result[T]:
        """Raise ValidationFailed if there are faults, otherwise return self."""
        if self.faults: raise ValidationFailed(self, message)
        return self

    def to_dict(self) -> dict[str, Any]:
        return {"fault_count": len(self.faults), "faults": [f.to_dict() for f in self.faults]}

    @classmethod
    def of(cls, value: T, faults: Sequence[Fault] = ()) -> Result[T]:
        return cls(value=value, faults=tuple(faults))
