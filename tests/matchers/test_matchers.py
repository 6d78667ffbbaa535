"""Pre-built matchers: descriptions, null handling and registration."""

from __future__ import annotations

import pytest

from validscope import Entry, Fault, ValidateDefinition, matchers as m, validate


@pytest.mark.parametrize(
    "matcher, description",
    [
        (m.is_not_null(), "Must not be null"),
        (m.equal_to(3), "Must be equal to 3"),
        (m.one_of("a", "b"), "Must be one of ['a', 'b']"),
        (m.blank(), "Must be blank char sequence"),
        (m.not_blank(), "Must be not blank char sequence"),
        (m.empty(), "Must be empty"),
        (m.not_empty(), "Must be not empty"),
        (m.length_in(1, 5), "Length must be in range 1..5"),
        (m.size_in(0, 2), "Size must be in range 0..2"),
        (m.greater_than(0), "Must be greater than 0"),
        (m.minimum(18), "Must be minimum 18"),
        (m.in_range(1, 10), "Must be in range 1..10"),
        (m.matches_pattern(r"\d+"), "Must match pattern '\\d+'"),
        (m.maps_key("role", "admin"), "Key role must be mapped to admin"),
    ],
)
def test_descriptions(matcher, description):
    assert matcher.description == description


@pytest.mark.parametrize("matcher", [m.is_not_null(), m.equal_to(0), m.is_true(), m.blank(), m.not_blank(), m.empty(), m.not_empty()])
def test_presence_checks_fail_on_none(matcher):
    assert matcher.test(None) is False


@pytest.mark.parametrize(
    "matcher",
    [m.has_length(2), m.length_in(1, 3), m.size_in(1, 3), m.matches_pattern("x"), m.greater_than(0), m.maximum(1), m.in_range(0, 1)],
)
def test_shape_checks_pass_on_none(matcher):
    assert matcher.test(None) is True


def test_blank_and_empty():
    assert m.blank().test("  \t")
    assert not m.not_blank().test(" ")
    assert m.empty().test({})
    assert m.not_empty().test([0])
    assert not m.empty().test(0)


def test_pattern_must_match_whole_string():
    pattern = m.matches_pattern(r"[a-z]+")

    assert pattern.test("abc")
    assert not pattern.test("abc1")


def test_mapping_matchers_only_judge_their_entry():
    maps_key = m.maps_key("role", "admin")
    maps_value = m.maps_value("admin", "role")

    assert maps_key.test(Entry("role", "admin"))
    assert not maps_key.test(Entry("role", "guest"))
    assert maps_key.test(Entry("team", "guest"))
    assert not maps_value.test(Entry("owner", "admin"))
    assert maps_value.test(Entry("owner", "guest"))


def test_expect_registers_each_matcher_in_order():
    result = validate("", lambda d: d.value().expect(m.not_blank(), m.length_in(3, 8)))

    assert result.faults == (
        Fault("this", "Must be not blank char sequence", ""),
        Fault("this", "Length must be in range 3..8", ""),
    )


def test_expect_with_matchers_and_match_mix():
    def schema(d: ValidateDefinition) -> None:
        d.value() \
            .expect(m.greater_than(0)) \
            .match(lambda n: n % 2 == 0).description("must be even")

    assert [f.description for f in validate(-3, schema).faults] == ["Must be greater than 0", "must be even"]


def test_with_description_overrides_text():
    result = validate(200, lambda d: d.value().expect(m.maximum(120).with_description("age is implausible")))

    assert result.faults == (Fault("this", "age is implausible", 200),)


def test_matcher_decorator_builds_predicate():
    @m.matcher("Must be even")
    def even(n: int) -> bool:
        return n % 2 == 0

    assert isinstance(even, m.Matcher)
    assert even(4)
    assert validate(3, lambda d: d.value().expect(even)).faults == (Fault("this", "Must be even", 3),)


def test_predicate_errors_propagate():
    @m.matcher("Must be positive")
    def positive(n):
        return n > 0

    with pytest.raises(TypeError):
        validate("text", lambda d: d.value().expect(positive))


def test_entries_with_mapping_matchers():
    result = validate(
        {"role": "guest", "team": "core"},
        lambda d: d.entries(lambda e: e.value().expect(m.maps_key("role", "admin"))),
    )

    assert result.faults == (Fault("this.entries[0]", "Key role must be mapped to admin", Entry("role", "guest")),)
