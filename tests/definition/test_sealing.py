"""Definitions are fixed once their builder has run."""

from __future__ import annotations

import pytest

from validscope import DefinitionError, ErrorCode, ValidateDefinition, definition, validate


def test_built_definition_is_sealed():
    built = definition(lambda d: d.value().match(bool).description("must be truthy"))

    assert built.sealed
    assert "sealed" in repr(built)


@pytest.mark.parametrize("operation", [
    lambda d: d.value(),
    lambda d: d.properties(),
    lambda d: d.elements(),
    lambda d: d.keys(),
    lambda d: d.values(),
    lambda d: d.entries(),
    lambda d: d.include(ValidateDefinition()),
])
def test_declarations_on_sealed_definition_raise(operation):
    built = definition(lambda d: None)

    with pytest.raises(DefinitionError) as excinfo:
        operation(built)

    assert excinfo.value.code is ErrorCode.E2102_DEFINITION_SEALED


def test_scopes_leaked_from_builder_are_sealed_too():
    leaked = {}

    def schema(d: ValidateDefinition) -> None:
        leaked["value"] = d.value()
        leaked["properties"] = d.properties()
        leaked["elements"] = d.elements()

    definition(schema)

    with pytest.raises(DefinitionError):
        leaked["value"].match(lambda v: True)
    with pytest.raises(DefinitionError):
        leaked["properties"].validate("name", lambda n: None)
    with pytest.raises(DefinitionError):
        leaked["elements"].value()


def test_description_can_only_be_set_once():
    def schema(d: ValidateDefinition) -> None:
        handle = d.value().match(lambda v: v > 0)
        handle.description("must be positive")
        handle.description("again")

    with pytest.raises(DefinitionError) as excinfo:
        definition(schema)

    assert excinfo.value.code is ErrorCode.E2103_DESCRIPTION_ALREADY_SET


def test_description_after_sealing_raises():
    handles = []
    definition(lambda d: handles.append(d.value().match(lambda v: v > 0)))

    with pytest.raises(DefinitionError) as excinfo:
        handles[0].description("too late")

    assert excinfo.value.code is ErrorCode.E2102_DEFINITION_SEALED


def test_evaluation_never_grows_definition():
    built = definition(lambda d: d.elements(lambda e: e.value().match(lambda v: v > 0).description("positive")))

    for values in ([1, -1], [-5, -6, -7], []):
        built.apply_to(values)

    assert built.value_constraints == ()


@pytest.mark.parametrize("builder", [None, 42, "schema"])
def test_non_callable_builder_rejected(builder):
    with pytest.raises(DefinitionError) as excinfo:
        validate(1, builder)

    assert excinfo.value.code is ErrorCode.E2101_INVALID_BUILDER


def test_existing_definition_is_returned_unchanged():
    built = definition(lambda d: None)

    assert definition(built) is built


def test_builder_exception_propagates():
    def broken(d: ValidateDefinition) -> None:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        definition(broken)
