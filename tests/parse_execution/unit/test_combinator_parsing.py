"""Combinator schema parsing tests."""

from __future__ import annotations

import pytest
import simple_schema_validator as v
from simple_schema_validator.issue_reporting.issue_models import IssueCode


def _user_schema() -> v.ObjectSchema:
    return v.object_(
        {
            "id": v.string().max(100),
            "name": v.string().max(100),
            "address": v.object_(
                {
                    "city": v.string().max(100),
                    "country": v.string().max(100),
                }
            ),
        }
    )


def test_nested_object_round_trips() -> None:
    request = {
        "id": "123",
        "name": "Grace",
        "address": {"city": "Medan", "country": "Indonesia"},
    }

    assert v.parse(_user_schema(), request) == request


def test_object_reports_every_field_error_with_paths() -> None:
    result = v.safe_parse(
        _user_schema(),
        {"id": 1, "address": {"city": "Medan", "country": 7}},
    )

    assert [(issue.code, issue.path) for issue in result.issues] == [
        (IssueCode.INVALID_TYPE, ("id",)),
        (IssueCode.INVALID_TYPE, ("name",)),
        (IssueCode.INVALID_TYPE, ("address", "country")),
    ]
    assert result.issues[1].message == "Required"


def test_object_rejects_non_mapping_input() -> None:
    issue = v.safe_parse(_user_schema(), ["not", "an", "object"]).issues[0]

    assert issue.params == {"expected": "object", "received": "array"}


def test_unknown_keys_are_stripped_by_default() -> None:
    schema = v.object_({"name": v.string()})

    assert v.parse(schema, {"name": "Grace", "role": "admin"}) == {"name": "Grace"}


def test_passthrough_keeps_unknown_keys() -> None:
    schema = v.object_({"name": v.string()}).passthrough()

    assert v.parse(schema, {"name": "Grace", "role": "admin"}) == {
        "name": "Grace",
        "role": "admin",
    }


def test_strict_reports_each_unknown_key_after_fields() -> None:
    schema = v.object_({"name": v.string()}).strict()

    result = v.safe_parse(schema, {"role": "admin", "name": 5, "team": "qa"})

    assert [(issue.code, issue.path) for issue in result.issues] == [
        (IssueCode.INVALID_TYPE, ("name",)),
        (IssueCode.UNRECOGNIZED_KEYS, ("role",)),
        (IssueCode.UNRECOGNIZED_KEYS, ("team",)),
    ]
    assert result.issues[1].params["keys"] == ("role",)


def test_optional_field_may_be_absent_and_is_omitted() -> None:
    register = v.object_(
        {
            "username": v.string().email(),
            "password": v.string().min(8).max(20),
            "firstName": v.string().min(3).max(25),
            "lastName": v.string().min(3).max(25).optional(),
        }
    )

    result = v.parse(
        register,
        {"username": "grace@gmail.com", "password": "grace123", "firstName": "Grace Angeline"},
    )

    assert result == {
        "username": "grace@gmail.com",
        "password": "grace123",
        "firstName": "Grace Angeline",
    }


def test_optional_still_validates_present_values_and_none_is_a_value() -> None:
    schema = v.object_({"nickname": v.string().min(3).optional()})

    assert v.safe_parse(schema, {"nickname": "Al"}).issues[0].code == IssueCode.TOO_SMALL
    assert v.safe_parse(schema, {"nickname": None}).issues[0].params["received"] == "null"


def test_nullable_accepts_none() -> None:
    schema = v.object_({"nickname": v.string().nullable()})

    assert v.parse(schema, {"nickname": None}) == {"nickname": None}
    assert v.safe_parse(schema, {}).issues[0].message == "Required"


def test_default_fills_missing_value_without_running_inner_schema() -> None:
    schema = v.object_(
        {
            "role": v.string().email().default("guest"),
            "tags": v.array(v.string()).default([]),
        }
    )

    first = v.parse(schema, {})
    first["tags"].append("mutated")
    second = v.parse(schema, {})

    assert second == {"role": "guest", "tags": []}
    assert v.safe_parse(schema, {"role": "guest"}).issues[0].code == IssueCode.INVALID_STRING


def test_default_factory_is_called_per_parse() -> None:
    counter = iter(range(10))
    schema = v.number().default(lambda: next(counter))

    assert v.parse(schema, v.MISSING) == 0
    assert v.parse(schema, v.MISSING) == 1


def test_array_checks_size_then_every_element() -> None:
    schema = v.array(v.string()).min(1).max(2)

    assert v.parse(schema, ["a", "b"]) == ["a", "b"]
    assert v.parse(schema, ("a",)) == ["a"]
    result = v.safe_parse(schema, ["a", 1, 2])
    assert [(issue.code, issue.path) for issue in result.issues] == [
        (IssueCode.TOO_BIG, ()),
        (IssueCode.INVALID_TYPE, (1,)),
        (IssueCode.INVALID_TYPE, (2,)),
    ]


def test_array_rejects_strings() -> None:
    issue = v.safe_parse(v.array(v.string()), "abc").issues[0]

    assert issue.params["expected"] == "array"


def test_set_deduplicates_and_validates_elements() -> None:
    schema = v.set_(v.string()).min(1).max(10)

    result = v.parse(schema, {"a", "b", "c"})

    assert result == {"a", "b", "c"}
    assert "a" in result
    empty = v.safe_parse(schema, set()).issues[0]
    assert empty.code == IssueCode.TOO_SMALL
    assert empty.message == "Set must contain at least 1 element(s)"
    bad = v.safe_parse(schema, frozenset({3})).issues[0]
    assert bad.code == IssueCode.INVALID_TYPE
    assert bad.path == (0,)


def test_set_requires_set_input() -> None:
    issue = v.safe_parse(v.set_(v.string()), ["a"]).issues[0]

    assert issue.params == {"expected": "set", "received": "array"}


def test_tuple_validates_positions_and_optional_trailing_slot() -> None:
    schema = v.tuple_([v.string(), v.number(), v.boolean().optional()])

    assert v.parse(schema, ["Grace", 24]) == ("Grace", 24)
    assert v.parse(schema, ("Grace", 24, True)) == ("Grace", 24, True)
    result = v.safe_parse(schema, ["Grace"])
    assert [(issue.message, issue.path) for issue in result.issues] == [("Required", (1,))]


def test_tuple_without_rest_rejects_extra_items() -> None:
    issue = v.safe_parse(v.tuple_([v.string()]), ["a", "b"]).issues[0]

    assert issue.code == IssueCode.TOO_BIG
    assert issue.params["maximum"] == 1
    assert issue.message == "Tuple must contain at most 1 element(s)"


def test_tuple_rest_validates_extra_items() -> None:
    schema = v.tuple_([v.string()], rest=v.number())

    assert v.parse(schema, ["a", 1, 2]) == ("a", 1, 2)
    assert v.safe_parse(schema, ["a", 1, "x"]).issues[0].path == (2,)


def test_map_validates_keys_and_values() -> None:
    schema = v.map_(v.string(), v.string())

    result = v.parse(schema, {"name": "Grace", "age": "24"})

    assert result["name"] == "Grace"
    issues = v.safe_parse(schema, {"name": 1, 2: "two"}).issues
    assert [issue.path for issue in issues] == [("name", "value"), (2, "key")]


def test_map_uses_position_for_unrepresentable_keys() -> None:
    schema = v.map_(v.string(), v.number())

    issue = v.safe_parse(schema, {("a", "b"): 1}).issues[0]

    assert issue.path == (0, "key")


def test_union_succeeds_via_later_member() -> None:
    schema = v.union([v.string(), v.number()])

    assert v.parse(schema, 42) == 42
    assert v.parse(schema, "42") == "42"


def test_union_failure_is_single_issue_with_member_causes() -> None:
    schema = v.object_({"value": v.union([v.string(), v.number().min(10)])})

    result = v.safe_parse(schema, {"value": 3})

    assert len(result.issues) == 1
    issue = result.issues[0]
    assert issue.code == IssueCode.INVALID_UNION
    assert issue.path == ("value",)
    causes = issue.params["union_errors"]
    assert [[cause.code for cause in member] for member in causes] == [
        [IssueCode.INVALID_TYPE],
        [IssueCode.TOO_SMALL],
    ]
    assert causes[1][0].path == ("value",)


def test_union_of_primitives_rejects_object() -> None:
    result = v.safe_parse(v.union([v.string(), v.number()]), {})

    assert [issue.code for issue in result.issues] == [IssueCode.INVALID_UNION]


def test_union_member_refinement_issues_do_not_leak() -> None:
    schema = v.union(
        [
            v.string().refine(lambda value: value.isupper(), "must be uppercase"),
            v.string().transform(str.upper),
        ]
    )

    assert v.parse(schema, "grace") == "GRACE"


@pytest.mark.parametrize(
    ("schema", "value", "expected"),
    [
        (v.tuple_([v.string()]), "a", "tuple"),
        (v.map_(v.string(), v.string()), [], "map"),
    ],
)
def test_combinators_reject_wrong_container(
    schema: v.Schema, value: object, expected: str
) -> None:
    issue = v.safe_parse(schema, value).issues[0]

    assert issue.code == IssueCode.INVALID_TYPE
    assert issue.params["expected"] == expected


def test_partial_object_accepts_empty_input() -> None:
    assert v.parse(_user_schema().partial(), {}) == {}


def test_unhashable_set_element_output_is_a_definition_error() -> None:
    schema = v.set_(v.string().transform(lambda value: [value]))

    with pytest.raises(v.SchemaDefinitionError, match="Set element"):
        v.safe_parse(schema, {"a"})


def test_unhashable_map_key_output_is_a_definition_error() -> None:
    schema = v.map_(v.string().transform(lambda value: {value: 1}), v.number())

    with pytest.raises(v.SchemaDefinitionError, match="Map key"):
        v.safe_parse(schema, {"a": 1})
