"""Result continuations and fault helpers."""

from __future__ import annotations

import pytest

from validscope import Fault, Result, ValidationFailed, ValidateDefinition, validate

from dtos import User


def _user_schema(u: ValidateDefinition) -> None:
    u.properties(lambda p: p
        .validate("name", lambda n: n.value()
            .match(lambda v: v is not None).description("name is required")
            .match(lambda v: v is None or v.istitle()).description("name must be capitalised"))
        .validate("age", lambda a: a.value().match(lambda v: v is None or v >= 0).description("age must not be negative")))


def test_success_runs_only_without_faults():
    seen = []

    result = validate(User(name="Alice", age=3), _user_schema) \
        .success(lambda value: seen.append(("success", value.name))) \
        .fail(lambda value, faults: seen.append(("fail", len(faults))))

    assert seen == [("success", "Alice")]
    assert result.faults == ()


def test_fail_runs_only_with_faults():
    seen = []

    validate(User(name="alice", age=-1), _user_schema) \
        .success(lambda value: seen.append("success")) \
        .fail(lambda value, faults: seen.append([f.path for f in faults]))

    assert seen == [["this.name", "this.age"]]


def test_continuations_return_same_result():
    result = validate(User(name=None), _user_schema)

    assert result.success(lambda value: None) is result
    assert result.fail(lambda value, faults: None) is result


def test_continuation_exceptions_propagate():
    result = validate(User(name=None), _user_schema)

    with pytest.raises(KeyError):
        result.fail(lambda value, faults: {}["missing"])


def test_field_faults_group_by_path():
    result = Result.of("x", [Fault("this.a", "one"), Fault("this.b", "two"), Fault("this.a", "three")])

    assert list(result.field_faults) == ["this.a", "this.b"]
    assert [f.description for f in result.faults_at("this.a")] == ["one", "three"]
    assert result.first_fault == Fault("this.a", "one")


def test_result_without_faults_helpers():
    result = Result.of(1)

    assert result.first_fault is None
    assert result.field_faults == {}
    assert result.raise_for_faults() is result
    assert result.to_dict() == {"fault_count": 0, "faults": []}


def test_raise_for_faults_carries_result():
    result = validate(User(name=None), _user_schema)

    with pytest.raises(ValidationFailed) as excinfo:
        result.raise_for_faults("User rejected")

    error = excinfo.value
    assert error.result is result
    assert str(error) == "this.name: name is required"
    assert error.to_dict() == {"error": {
        "type": "validation_failed",
        "message": "User rejected",
        "fault_count": 1,
        "faults": [{"path": "this.name", "description": "name is required", "value": None}],
    }}


def test_fault_is_immutable():
    fault = Fault("this", "broken", 1)

    with pytest.raises(AttributeError):
        fault.path = "elsewhere"
    assert fault.to_dict() == {"path": "this", "description": "broken", "value": 1}
