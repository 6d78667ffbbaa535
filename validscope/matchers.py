"""Pre-built Matchers

Shorthand constraints registered through `ValueValidator.expect`:

    user.properties().validate("name", lambda name: name.value().expect(
        is_not_null(), not_blank(), length_in(1, 64)))

Null handling:
- is_null/is_not_null, equality, boolean, blank and empty checks fail on None
- length, size, pattern, ordering and mapping checks pass on None
  (validate-if-present); pair them with is_not_null() to require a value.
"""
from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Sized
from dataclasses import dataclass, field
from typing import Any, Callable


class Matcher(ABC):
    """Base class for matchers: a test plus the description of its constraint."""

    @abstractmethod
    def test(self, value: Any) -> bool:
        """Return True if `value` satisfies the constraint."""

    @property
    @abstractmethod
    def description(self) -> str:
        """Description reported in faults."""

    def __call__(self, value: Any) -> bool: return self.test(value)

    def with_description(self, description: str) -> WithDescription: return WithDescription(self, description)


# ============================================================================
# Presence & Equality
# ============================================================================

@dataclass(frozen=True, slots=True)
class IsNull(Matcher):
    @property
    def description(self) -> str: return "Must be null"

    def test(self, value: Any) -> bool: return value is None


@dataclass(frozen=True, slots=True)
class IsNotNull(Matcher):
    @property
    def description(self) -> str: return "Must not be null"

    def test(self, value: Any) -> bool: return value is not None


@dataclass(frozen=True, slots=True)
class EqualTo(Matcher):
    expected: Any

    @property
    def description(self) -> str: return f"Must be equal to {self.expected}"

    def test(self, value: Any) -> bool: return value == self.expected


@dataclass(frozen=True, slots=True)
class OneOf(Matcher):
    """Value is one of the allowed options."""
    options: tuple

    def __init__(self, *options: Any):
        object.__setattr__(self, "options", options)

    @property
    def description(self) -> str: return f"Must be one of {list(self.options)}"

    def test(self, value: Any) -> bool: return value in self.options


@dataclass(frozen=True, slots=True)
class IsTrue(Matcher):
    @property
    def description(self) -> str: return "Must be true"

    def test(self, value: Any) -> bool: return value is True


@dataclass(frozen=True, slots=True)
class IsFalse(Matcher):
    @property
    def description(self) -> str: return "Must be false"

    def test(self, value: Any) -> bool: return value is False


# ============================================================================
# Blank & Empty
# ============================================================================

@dataclass(frozen=True, slots=True)
class Blank(Matcher):
    """String is empty or whitespace-only; None fails."""

    @property
    def description(self) -> str: return "Must be blank char sequence"

    def test(self, value: Any) -> bool: return isinstance(value, str) and not value.strip()


@dataclass(frozen=True, slots=True)
class NotBlank(Matcher):
    """String has at least one non-whitespace character; None fails."""

    @property
    def description(self) -> str: return "Must be not blank char sequence"

    def test(self, value: Any) -> bool: return isinstance(value, str) and bool(value.strip())


@dataclass(frozen=True, slots=True)
class Empty(Matcher):
    """Sized value (string, collection, mapping) has no members; None fails."""

    @property
    def description(self) -> str: return "Must be empty"

    def test(self, value: Any) -> bool: return isinstance(value, Sized) and len(value) == 0


@dataclass(frozen=True, slots=True)
class NotEmpty(Matcher):
    @property
    def description(self) -> str: return "Must be not empty"

    def test(self, value: Any) -> bool: return isinstance(value, Sized) and len(value) > 0


# ============================================================================
# Length, Size & Pattern (pass on None)
# ============================================================================

@dataclass(frozen=True, slots=True)
class HasLength(Matcher):
    length: int

    @property
    def description(self) -> str: return f"Length must be {self.length}"

    def test(self, value: Any) -> bool: return value is None or len(value) == self.length


@dataclass(frozen=True, slots=True)
class LengthIn(Matcher):
    """Length within the closed range [min_length, max_length]."""
    min_length: int
    max_length: int

    @property
    def description(self) -> str: return f"Length must be in range {self.min_length}..{self.max_length}"

    def test(self, value: Any) -> bool:
        return value is None or self.min_length <= len(value) <= self.max_length


@dataclass(frozen=True, slots=True)
class HasSize(Matcher):
    size: int

    @property
    def description(self) -> str: return f"Size must be {self.size}"

    def test(self, value: Any) -> bool: return value is None or len(value) == self.size


@dataclass(frozen=True, slots=True)
class SizeIn(Matcher):
    min_size: int
    max_size: int

    @property
    def description(self) -> str: return f"Size must be in range {self.min_size}..{self.max_size}"

    def test(self, value: Any) -> bool:
        return value is None or self.min_size <= len(value) <= self.max_size


@dataclass(frozen=True, slots=True)
class MatchesPattern(Matcher):
    """Whole string matches the pattern; compiled once at construction."""
    pattern: str | re.Pattern
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_compiled", re.compile(self.pattern))

    @property
    def description(self) -> str: return f"Must match pattern '{self._compiled.pattern}'"

    def test(self, value: Any) -> bool: return value is None or self._compiled.fullmatch(value) is not None


# ============================================================================
# Ordering (pass on None)
# ============================================================================

@dataclass(frozen=True, slots=True)
class GreaterThan(Matcher):
    bound: Any

    @property
    def description(self) -> str: return f"Must be greater than {self.bound}"

    def test(self, value: Any) -> bool: return value is None or value > self.bound


@dataclass(frozen=True, slots=True)
class LessThan(Matcher):
    bound: Any

    @property
    def description(self) -> str: return f"Must be less than {self.bound}"

    def test(self, value: Any) -> bool: return value is None or value < self.bound


@dataclass(frozen=True, slots=True)
class Minimum(Matcher):
    bound: Any

    @property
    def description(self) -> str: return f"Must be minimum {self.bound}"

    def test(self, value: Any) -> bool: return value is None or value >= self.bound


@dataclass(frozen=True, slots=True)
class Maximum(Matcher):
    bound: Any

    @property
    def description(self) -> str: return f"Must be maximum {self.bound}"

    def test(self, value: Any) -> bool: return value is None or value <= self.bound


@dataclass(frozen=True, slots=True)
class InRange(Matcher):
    """Value within the closed range [low, high]."""
    low: Any
    high: Any

    @property
    def description(self) -> str: return f"Must be in range {self.low}..{self.high}"

    def test(self, value: Any) -> bool: return value is None or self.low <= value <= self.high


# ============================================================================
# Mapping entries (pass on None)
# ============================================================================

@dataclass(frozen=True, slots=True)
class MapsKey(Matcher):
    """An entry with `key` must carry `value`; other entries pass."""
    key: Any
    value: Any

    @property
    def description(self) -> str: return f"Key {self.key} must be mapped to {self.value}"

    def test(self, entry: Any) -> bool:
        return entry is None or entry[0] != self.key or entry[1] == self.value


@dataclass(frozen=True, slots=True)
class MapsValue(Matcher):
    """An entry with `value` must sit under `key`; other entries pass."""
    value: Any
    key: Any

    @property
    def description(self) -> str: return f"Value {self.value} must be mapped to {self.key}"

    def test(self, entry: Any) -> bool:
        return entry is None or entry[1] != self.value or entry[0] == self.key


# ============================================================================
# Custom
# ============================================================================

@dataclass(frozen=True, slots=True)
class WithDescription(Matcher):
    """Wrapper to override the description."""
    matcher: Matcher
    text: str

    @property
    def description(self) -> str: return self.text

    def test(self, value: Any) -> bool: return self.matcher.test(value)


@dataclass(frozen=True, slots=True)
class Predicate(Matcher):
    """Matcher from a plain predicate. Exceptions raised by `fn` propagate."""
    fn: Callable[[Any], Any]
    text: str = ""

    @property
    def description(self) -> str: return self.text

    def test(self, value: Any) -> bool: return bool(self.fn(value))


def matcher(description: str) -> Callable[[Callable[[Any], Any]], Predicate]:
    """Decorator to create a matcher from a predicate function.

    Usage:
        @matcher("Must be even")
        def even(n: int) -> bool:
            return n % 2 == 0

        value.expect(even)
    """
    return lambda fn: Predicate(fn, description)


is_null = IsNull
is_not_null = IsNotNull
equal_to = EqualTo
one_of = OneOf
is_true = IsTrue
is_false = IsFalse
blank = Blank
not_blank = NotBlank
empty = Empty
not_empty = NotEmpty
has_length = HasLength
length_in = LengthIn
has_size = HasSize
size_in = SizeIn
matches_pattern = MatchesPattern
greater_than = GreaterThan
less_than = LessThan
minimum = Minimum
maximum = Maximum
in_range = InRange
maps_key = MapsKey
maps_value = MapsValue
