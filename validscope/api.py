"""Entry points: build-and-evaluate, cached evaluation, and compilation."""
from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from validscope.cache import ValidatorCache, default_cache
from validscope.definition import Builder, ValidateDefinition, build_definition
from validscope.result import Result

T = TypeVar("T")


def definition(builder: Builder) -> ValidateDefinition:
    """Compile a reusable definition without evaluating it."""
    return build_definition(builder)


def validate(value: T, builder: Builder, root: str | None = None) -> Result[T]:
    """Build a definition from `builder` and apply it to `value`. Nothing is cached."""
    return build_definition(builder).apply_to(value, root)


def cached_definition(
    builder: Builder,
    key: Hashable | None = None,
    cache: ValidatorCache | None = None,
) -> ValidateDefinition:
    """Resolve the memoized definition for `builder`, compiling it on first use."""
    return (default_cache if cache is None else cache).get_or_build(builder, key)


def validate_cached(
    value: T,
    builder: Builder,
    root: str | None = None,
    key: Hashable | None = None,
    cache: ValidatorCache | None = None,
) -> Result[T]:
    """Like `validate`, reusing the compiled definition across calls."""
    return cached_definition(builder, key, cache).apply_to(value, root)
