"""Error Taxonomy

Typed error codes and the immutable AppError record shared by every
exception the library raises. Validation faults are data, not errors:
only schema misuse and explicit `raise_for_faults` calls end up here.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class ErrorCode(Enum):
    """Hierarchical error code taxonomy.

    E20xx: Validation outcomes (faults surfaced as errors)
    E21xx: Definition/schema construction errors
    E9xxx: Internal/Unknown errors
    """
    # Validation (E20xx)
    E2000_VALIDATION_GENERIC = 2000
    E2001_VALIDATION_FAILED = 2001

    # Definition (E21xx)
    E2100_DEFINITION_GENERIC = 2100
    E2101_INVALID_BUILDER = 2101
    E2102_DEFINITION_SEALED = 2102
    E2103_DESCRIPTION_ALREADY_SET = 2103
    E2104_INVALID_ACCESSOR = 2104

    # Internal (E9xxx)
    E9000_INTERNAL_GENERIC = 9000
    E9001_UNEXPECTED_ERROR = 9001

    @property
    def http_status(self) -> int:
        """Map error code to appropriate HTTP status."""
        code = self.value
        if 2000 <= code < 2100:
            return 422
        return 500

    @property
    def category(self) -> str:
        """Human-readable error category."""
        code = self.value
        if 2000 <= code < 2100:
            return "validation"
        if 2100 <= code < 2200:
            return "definition"
        return "internal"


@dataclass(frozen=True, slots=True)
class AppError:
    """Base error record with code, message and structured metadata."""
    code: ErrorCode
    message: str
    metadata: dict = field(default_factory=dict)
    cause: Exception | None = None

    def with_metadata(self, **kwargs) -> AppError:
        """Create new error with additional metadata."""
        return AppError(
            code=self.code,
            message=self.message,
            metadata={**self.metadata, **kwargs},
            cause=self.cause,
        )

    def chain(self, cause: Exception) -> AppError:
        """Chain this error with a cause."""
        return AppError(
            code=self.code,
            message=self.message,
            metadata=self.metadata,
            cause=cause,
        )

    def to_dict(self) -> dict:
        """Serialize error for API responses."""
        return {
            "error": {
                "code": self.code.name,
                "code_num": self.code.value,
                "message": self.message,
                "category": self.code.category,
                "metadata": self.metadata,
            }
        }

    def __str__(self) -> str:
        return f"[{self.code.name}] {self.message}"
