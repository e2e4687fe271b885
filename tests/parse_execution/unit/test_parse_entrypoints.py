"""Throwing and non-throwing parse mode tests."""

from __future__ import annotations

import asyncio

import pytest
import simple_schema_validator as v
from simple_schema_validator.issue_reporting.issue_models import IssueCode


def _login_schema() -> v.ObjectSchema:
    return v.object_(
        {
            "username": v.string().email(),
            "password": v.string().min(8).max(20),
        }
    )


def test_safe_parse_and_parse_agree_on_success() -> None:
    request = {"username": "grace@gmail.com", "password": "grace123"}

    result = v.safe_parse(_login_schema(), request)

    assert result.success
    assert result.data == request
    assert v.parse(_login_schema(), request) == result.data


def test_safe_parse_and_parse_agree_on_failure() -> None:
    request = {"username": "grace", "password": "short"}

    result = v.safe_parse(_login_schema(), request)
    with pytest.raises(v.ValidationError) as raised:
        v.parse(_login_schema(), request)

    assert not result.success
    assert raised.value.issues == result.issues
    assert [issue.path for issue in raised.value.errors] == [("username",), ("password",)]


def test_validation_error_summary_and_flatten() -> None:
    error = v.safe_parse(_login_schema(), {"password": "short"}).error

    assert str(error) == (
        "Validation failed with 2 issue(s):\n"
        "  - username: Required (invalid_type)\n"
        "  - password: String must contain at least 8 character(s) (too_small)"
    )
    flattened = error.flatten()
    assert flattened.form_errors == ()
    assert flattened.field_errors == {
        "username": ("Required",),
        "password": ("String must contain at least 8 character(s)",),
    }
    assert error.messages == (
        "Required",
        "String must contain at least 8 character(s)",
    )


def test_root_level_issues_flatten_to_form_errors() -> None:
    error = v.safe_parse(_login_schema(), "nope").error

    assert error.flatten().form_errors == ("Expected object, received string",)
    assert "<root>" in str(error)


def test_parsing_is_repeatable_and_does_not_mutate_input() -> None:
    schema = v.object_({"tags": v.array(v.string().transform(str.upper))})
    request = {"tags": ["a", "b"], "extra": True}

    first = v.parse(schema, request)
    second = v.parse(schema, request)

    assert first == second == {"tags": ["A", "B"]}
    assert request == {"tags": ["a", "b"], "extra": True}


def test_schema_methods_delegate_to_entry_points() -> None:
    schema = v.string().min(2)

    assert schema.parse("ok") == "ok"
    assert not schema.safe_parse("x").success
    assert asyncio.run(schema.parse_async("ok")) == "ok"
    assert not asyncio.run(schema.safe_parse_async("x")).success


def test_missing_root_value_for_optional_schema_yields_none() -> None:
    assert v.parse(v.string().optional(), v.MISSING) is None
    assert v.safe_parse(v.string().optional(), v.MISSING).data is None


def test_async_step_in_synchronous_mode_is_rejected() -> None:
    async def _lookup(value: str) -> str:
        return value

    schema = v.object_({"name": v.string().transform(_lookup)})

    with pytest.raises(v.SchemaDefinitionError, match="parse_async"):
        v.safe_parse(schema, {"name": "Grace"})
    with pytest.raises(v.SchemaDefinitionError):
        v.parse(schema, {"name": "Grace"})


def test_async_step_is_not_reached_when_inner_schema_fails() -> None:
    async def _lookup(value: str) -> str:
        return value

    result = v.safe_parse(v.string().transform(_lookup), 5)

    assert [issue.code for issue in result.issues] == [IssueCode.INVALID_TYPE]


def test_non_schema_argument_is_a_definition_error() -> None:
    with pytest.raises(v.SchemaDefinitionError):
        v.safe_parse({"name": v.string()}, {"name": "Grace"})


def test_settings_refinement_policy_applies_per_call() -> None:
    schema = (
        v.string()
        .refine(lambda value: value.isupper(), "must be uppercase")
        .refine(lambda value: len(value) > 8, "too short")
    )
    fail_fast = v.ParseSettings(refinement_policy=v.RefinementPolicy.FAIL_FAST)

    assert v.safe_parse(schema, "grace").error.messages == ("must be uppercase", "too short")
    assert v.safe_parse(schema, "grace", settings=fail_fast).error.messages == (
        "must be uppercase",
    )


def test_issue_to_dict_exposes_flat_shape() -> None:
    issue = v.safe_parse(_login_schema(), {"username": "grace@gmail.com"}).issues[0]

    assert issue.to_dict() == {
        "code": "invalid_type",
        "path": ["password"],
        "message": "Required",
        "expected": "string",
        "received": "missing",
    }
