"""Declarative Object Validation

Describe constraints on a value and on its nested properties, collection
elements and mapping keys/values/entries through a builder, then evaluate
that description against concrete values. Evaluation never raises for bad
data: it returns a Result carrying every fault with its path, description
and offending value.

Key Features:
- Builder-based definitions, sealed once built and reusable across values
- Null-safe property traversal (validate-if-present)
- Type-erased container declarations that fire only on matching shapes
- Thread-safe definition cache supporting recursive schemas
- Pre-built matchers for common constraints

Usage:
    from validscope import validate, matchers as m

    def user_schema(user):
        user.value().expect(m.is_not_null())
        user.properties(lambda p: p
            .validate("name", lambda name: name.value().expect(m.not_blank()))
            .validate("emails", lambda emails: emails.elements(
                lambda email: email.value().match(lambda e: "@" in e).description("must be an email"))))

    validate(user, user_schema) \\
        .success(lambda value: save(value)) \\
        .fail(lambda value, faults: report(faults))
"""
from . import matchers
from .api import cached_definition, definition, validate, validate_cached
from .cache import CacheStats, ValidatorCache, default_cache
from .definition import (
    Accessor,
    Attribute,
    Builder,
    Constraint,
    ConstraintHandle,
    Entry,
    Item,
    PropertyValidator,
    ValidateDefinition,
    ValueValidator,
)
from .errors import (
    AppError,
    DefinitionError,
    ErrorCode,
    ValidationFailed,
    ValidscopeError,
)
from .result import Fault, Result

__version__ = "0.1.0"

__all__ = [
    # Entry points
    "validate",
    "validate_cached",
    "definition",
    "cached_definition",
    # Definitions
    "ValidateDefinition",
    "ValueValidator",
    "PropertyValidator",
    "Constraint",
    "ConstraintHandle",
    "Builder",
    "Entry",
    "Attribute",
    "Item",
    "Accessor",
    # Cache
    "ValidatorCache",
    "CacheStats",
    "default_cache",
    # Results
    "Result",
    "Fault",
    # Errors
    "AppError",
    "ErrorCode",
    "ValidscopeError",
    "DefinitionError",
    "ValidationFailed",
    # Matchers
    "matchers",
]
