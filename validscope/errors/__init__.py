"""Error Handling System

Key components:
- ErrorCode: Hierarchical error code taxonomy
- AppError: Immutable error record with code and metadata
- ValidscopeError: Base exception wrapping an AppError
- DefinitionError: Schema construction misuse
- ValidationFailed: Raised on demand from a Result carrying faults

The FastAPI handlers live in `validscope.errors.handlers` and are not
imported here so the core library does not require FastAPI.
"""
from .types import AppError, ErrorCode
from .exceptions import (
    DefinitionError,
    ValidationFailed,
    ValidscopeError,
    definition_error,
    definition_sealed,
    description_already_set,
    invalid_accessor,
    invalid_builder,
)

__all__ = [
    "AppError",
    "ErrorCode",
    "ValidscopeError",
    "DefinitionError",
    "ValidationFailed",
    "definition_error",
    "definition_sealed",
    "description_already_set",
    "invalid_accessor",
    "invalid_builder",
]
