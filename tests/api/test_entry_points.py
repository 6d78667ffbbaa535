"""Top-level entry points: validate, definition and their cached variants."""

from __future__ import annotations

from validscope import (
    Fault,
    ValidateDefinition,
    cached_definition,
    default_cache,
    definition,
    validate,
    validate_cached,
)

from dtos import User


def adult_schema(u: ValidateDefinition) -> None:
    u.properties().validate("age", lambda a: a.value()
        .match(lambda age: age is None or age >= 18).description("must be an adult"))


def test_validate_uses_custom_root():
    result = validate(User(name="Bo", age=9), adult_schema, root="user")

    assert result.faults == (Fault("user.age", "must be an adult", 9),)
    assert result.value.name == "Bo"


def test_definition_is_reusable_across_values():
    compiled = definition(adult_schema)

    assert compiled.sealed
    assert compiled.name == "adult_schema"
    assert compiled.apply_to(User(name="A", age=30)).faults == ()
    assert len(compiled.apply_to(User(name="B", age=3)).faults) == 1


def test_definition_of_compiled_definition_is_identity():
    compiled = definition(adult_schema)

    assert definition(compiled) is compiled


def test_validate_cached_populates_default_cache():
    validate_cached(User(name="A", age=1), adult_schema)
    validate_cached(User(name="B", age=2), adult_schema)

    assert adult_schema in default_cache
    assert default_cache.stats.compilations == 1
    assert default_cache.stats.hits == 1


def test_cached_definition_with_private_cache(cache):
    compiled = cached_definition(adult_schema, cache=cache)

    assert cached_definition(adult_schema, cache=cache) is compiled
    assert adult_schema not in default_cache


def test_validate_cached_with_key_and_root(cache):
    first = validate_cached(User(name="A", age=1), lambda u: adult_schema(u), key="adult", root="u", cache=cache)
    second = validate_cached(User(name="B", age=40), lambda u: adult_schema(u), key="adult", cache=cache)

    assert first.faults == (Fault("u.age", "must be an adult", 1),)
    assert second.faults == ()
    assert cache.stats.compilations == 1
