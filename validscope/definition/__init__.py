"""Definition tree: the scopes that build a reusable constraint graph."""
from .accessors import Accessor, Attribute, Item, PropertyAccessor, resolve_accessor
from .constraint import Constraint, ConstraintHandle
from .definition import (
    Builder,
    Entry,
    ValidateDefinition,
    build_definition,
    is_element_iterable,
    is_map_like,
)
from .properties import PropertyValidator
from .value import ValueValidator

__all__ = [
    "Accessor",
    "Attribute",
    "Item",
    "PropertyAccessor",
    "resolve_accessor",
    "Constraint",
    "ConstraintHandle",
    "Builder",
    "Entry",
    "ValidateDefinition",
    "build_definition",
    "is_element_iterable",
    "is_map_like",
    "PropertyValidator",
    "ValueValidator",
]
