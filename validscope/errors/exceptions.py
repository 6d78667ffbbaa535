"""Exception Types and Builders

Exceptions wrap an AppError so every failure the library raises carries a
typed code and structured metadata. Builder functions give ergonomic
constructors for the definition errors raised during schema construction.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .types import AppError, ErrorCode

if TYPE_CHECKING:
    from validscope.result import Result


class ValidscopeError(Exception):
    """Base exception carrying an AppError."""

    def __init__(self, error: AppError):
        self.error = error
        super().__init__(str(error))

    @property
    def code(self) -> ErrorCode:
        return self.error.code

    def to_app_error(self) -> AppError:
        return self.error


class DefinitionError(ValidscopeError):
    """Raised when a definition is declared incorrectly.

    Always a programming error in the schema, never a property of the
    validated data.
    """


class ValidationFailed(ValidscopeError):
    """Raised by `Result.raise_for_faults` when the result carries faults."""

    def __init__(self, result: Result, message: str = "Validation failed"):
        self.result = result
        self.message = message
        super().__init__(AppError(
            code=ErrorCode.E2001_VALIDATION_FAILED,
            message=message,
            metadata={"fault_count": len(result.faults)},
        ))

    def __str__(self) -> str:
        faults = self.result.faults
        if not faults: return self.message
        if len(faults) == 1: return f"{(f := faults[0]).path}: {f.description}"
        return f"{self.message} ({len(faults)} faults)"

    @property
    def faults(self):
        return self.result.faults

    def to_app_error(self) -> AppError:
        """Convert to AppError, inlining a lone fault into the message."""
        faults = self.result.faults
        if len(faults) == 1:
            f = faults[0]
            return AppError(code=ErrorCode.E2001_VALIDATION_FAILED, message=f"{f.path}: {f.description}",
                metadata={"path": f.path, "description": f.description, "value": _jsonable(f.value)})
        return AppError(code=ErrorCode.E2001_VALIDATION_FAILED, message=f"{self.message}: {len(faults)} faults",
            metadata={"fault_count": len(faults), "faults": [_fault_dict(f) for f in faults]})

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for API responses."""
        return {"error": {"type": "validation_failed", "message": self.message,
            "fault_count": len(self.result.faults), "faults": [_fault_dict(f) for f in self.result.faults]}}


def _fault_dict(fault) -> dict[str, Any]:
    return {**fault.to_dict(), "value": _jsonable(fault.value)}


def _jsonable(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    if isinstance(value, dict):
        return {str(k): _jsonable(v) for k, v in value.items()}
    return repr(value)


# =============================================================================
# Definition error builders (E21xx)
# =============================================================================

def definition_error(
    message: str,
    *,
    code: ErrorCode = ErrorCode.E2100_DEFINITION_GENERIC,
    **metadata,
) -> DefinitionError:
    """Create definition/schema construction error."""
    return DefinitionError(AppError(
        code=code,
        message=message,
        metadata={k: v for k, v in metadata.items() if v is not None},
    ))


def definition_sealed(operation: str) -> DefinitionError:
    return definition_error(
        f"Cannot call '{operation}' on a sealed definition",
        code=ErrorCode.E2102_DEFINITION_SEALED,
        operation=operation,
    )


def description_already_set(current: str) -> DefinitionError:
    return definition_error(
        f"Constraint description is already set to '{current}'",
        code=ErrorCode.E2103_DESCRIPTION_ALREADY_SET,
        description=current,
    )


def invalid_accessor(accessor: Any) -> DefinitionError:
    return definition_error(
        f"Unsupported property accessor: {accessor!r}",
        code=ErrorCode.E2104_INVALID_ACCESSOR,
        accessor_type=type(accessor).__name__,
    )


def invalid_builder(builder: Any) -> DefinitionError:
    return definition_error(
        f"Builder must be callable or a ValidateDefinition, got {type(builder).__name__}",
        code=ErrorCode.E2101_INVALID_BUILDER,
        builder_type=type(builder).__name__,
    )
