"""Properties scope: nested definitions bound to named members."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, TypeVar

from validscope.errors import definition_sealed
from validscope.result import Fault

from .accessors import PropertyAccessor, resolve_accessor
from .paths import property_path

if TYPE_CHECKING:
    from .definition import Builder, ValidateDefinition

T = TypeVar("T")


class PropertyValidator(Generic[T]):
    """Binds property accessors to nested definitions.

    The same property may be validated any number of times; each nested
    definition is evaluated independently and their faults are merged
    under the same path. Properties are visited in the order they were
    first declared.
    """

    def __init__(self):
        self._validations: dict[PropertyAccessor, list[ValidateDefinition]] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def accessors(self) -> tuple[PropertyAccessor, ...]:
        return tuple(self._validations)

    def definitions_for(self, accessor: Any) -> tuple[ValidateDefinition, ...]:
        return tuple(self._validations.get(resolve_accessor(accessor), ()))

    def validate(self, accessor: Any, builder: Builder) -> PropertyValidator[T]:
        """Declare a nested definition for the property read by `accessor`."""
        from .definition import ValidateDefinition

        if self._sealed:
            raise definition_sealed("validate")
        resolved = resolve_accessor(accessor)
        nested = ValidateDefinition(name=str(resolved.name)).apply_builder(builder)
        self._validations.setdefault(resolved, []).append(nested)
        return self

    def seal(self) -> None:
        self._sealed = True
        for definitions in self._validations.values():
            for nested in definitions:
                nested.seal()

    def evaluate(self, value: T, path: str) -> list[Fault]:
        if value is None:
            return []
        faults: list[Fault] = []
        for accessor, definitions in self._validations.items():
            member = accessor.read(value)
            member_path = property_path(path, accessor.name)
            for nested in definitions:
                faults.extend(nested.evaluate(member, member_path))
        return faults
