"""Depth-first traversal of a schema tree against one input value.

Every node validator returns the validated output, `INVALID` when it recorded
issues, or `MISSING` when an optional branch had no input. Validators are
generators so asynchronous pipeline steps can suspend the whole traversal;
see `refinement_pipeline.step_runner`.
"""

from __future__ import annotations

from collections.abc import Generator, Mapping
from typing import Any

from simple_schema_validator.coercion.missing_values import MISSING, resolve_default
from simple_schema_validator.coercion.value_coercion import (
    NOT_CONVERTIBLE,
    coerce_value,
    describe_type,
    matches_kind,
)
from simple_schema_validator.issue_reporting import issue_messages
from simple_schema_validator.issue_reporting.issue_models import IssueCode, PathSegment
from simple_schema_validator.issue_reporting.validation_context import INVALID, ValidationContext
from simple_schema_validator.issue_reporting.validation_errors import SchemaDefinitionError
from simple_schema_validator.refinement_pipeline.step_runner import run_steps
from simple_schema_validator.schema_definition.constraint_checks import check_constraints
from simple_schema_validator.schema_definition.schema_nodes import (
    ArraySchema,
    DefaultSchema,
    MapSchema,
    NullableSchema,
    ObjectSchema,
    OptionalSchema,
    PipedSchema,
    PrimitiveSchema,
    Schema,
    SetSchema,
    TransformStep,
    TupleSchema,
    UnionSchema,
    UnknownKeys,
)

NodeGenerator = Generator[Any, Any, Any]


def walk(schema: Schema, value: Any, context: ValidationContext) -> NodeGenerator:
    """Validate `value` against `schema`, recording issues in `context`."""
    if isinstance(schema, PrimitiveSchema):
        return validate_primitive(schema, value, context)
    if isinstance(schema, ObjectSchema):
        return (yield from _walk_object(schema, value, context))
    if isinstance(schema, ArraySchema):
        return (yield from _walk_array(schema, value, context))
    if isinstance(schema, SetSchema):
        return (yield from _walk_set(schema, value, context))
    if isinstance(schema, TupleSchema):
        return (yield from _walk_tuple(schema, value, context))
    if isinstance(schema, MapSchema):
        return (yield from _walk_map(schema, value, context))
    if isinstance(schema, UnionSchema):
        return (yield from _walk_union(schema, value, context))
    if isinstance(schema, OptionalSchema):
        if value is MISSING:
            return MISSING
        return (yield from walk(schema.inner, value, context))
    if isinstance(schema, NullableSchema):
        if value is None:
            return None
        return (yield from walk(schema.inner, value, context))
    if isinstance(schema, DefaultSchema):
        if value is MISSING:
            return resolve_default(schema.default_value)
        return (yield from walk(schema.inner, value, context))
    if isinstance(schema, PipedSchema):
        return (yield from _walk_piped(schema, value, context))
    raise SchemaDefinitionError(f"Unsupported schema node: {type(schema).__name__}")


def validate_primitive(schema: PrimitiveSchema, value: Any, context: ValidationContext) -> Any:
    candidate = value
    if schema.coerce:
        candidate = coerce_value(schema.kind, value, context.settings.date_formats)
    if candidate is NOT_CONVERTIBLE:
        return _report_invalid_type(context, schema.kind.value, value)
    if not matches_kind(schema.kind, candidate):
        return _report_invalid_type(context, schema.kind.value, candidate)
    if not check_constraints(schema.kind.value, candidate, schema.constraints, context):
        return INVALID
    return candidate


def _walk_object(schema: ObjectSchema, value: Any, context: ValidationContext) -> NodeGenerator:
    if not isinstance(value, Mapping):
        return _report_invalid_type(context, "object", value)

    output: dict[Any, Any] = {}
    valid = True
    for name, field_schema in schema.fields:
        field_input = value[name] if name in value else MISSING
        with context.descend(name):
            field_output = yield from walk(field_schema, field_input, context)
        if field_output is INVALID:
            valid = False
        elif field_output is not MISSING:
            output[name] = field_output

    declared = {name for name, _ in schema.fields}
    for key in value:
        if key in declared:
            continue
        if schema.unknown_keys == UnknownKeys.STRICT:
            context.add_issue(
                IssueCode.UNRECOGNIZED_KEYS,
                issue_messages.unrecognized_key_message(key),
                path=(_segment_for(key, fallback=str(key)),),
                keys=(key,),
            )
            valid = False
        elif schema.unknown_keys == UnknownKeys.PASSTHROUGH:
            output[key] = value[key]
    return output if valid else INVALID


def _walk_array(schema: ArraySchema, value: Any, context: ValidationContext) -> NodeGenerator:
    if not isinstance(value, list | tuple):
        return _report_invalid_type(context, "array", value)
    valid = check_constraints("array", value, schema.constraints, context)
    output: list[Any] = []
    for index, item in enumerate(value):
        with context.descend(index):
            item_output = yield from walk(schema.element, item, context)
        if item_output is INVALID:
            valid = False
        else:
            output.append(item_output)
    return output if valid else INVALID


def _walk_set(schema: SetSchema, value: Any, context: ValidationContext) -> NodeGenerator:
    if not isinstance(value, set | frozenset):
        return _report_invalid_type(context, "set", value)
    valid = check_constraints("set", value, schema.constraints, context)
    output: set[Any] = set()
    for position, item in enumerate(value):
        with context.descend(position):
            item_output = yield from walk(schema.element, item, context)
        if item_output is INVALID:
            valid = False
        else:
            output.add(_require_hashable(item_output, "Set element"))
    return output if valid else INVALID


def _walk_tuple(schema: TupleSchema, value: Any, context: ValidationContext) -> NodeGenerator:
    if not isinstance(value, list | tuple):
        return _report_invalid_type(context, "tuple", value)

    valid = True
    output: list[Any] = []
    for index, item_schema in enumerate(schema.items):
        item_input = value[index] if index < len(value) else MISSING
        with context.descend(index):
            item_output = yield from walk(item_schema, item_input, context)
        if item_output is INVALID:
            valid = False
        elif item_output is not MISSING:
            output.append(item_output)

    extra = value[len(schema.items) :]
    if extra and schema.rest is None:
        maximum = len(schema.items)
        context.add_issue(
            IssueCode.TOO_BIG,
            issue_messages.too_big_message("tuple", maximum),
            maximum=maximum,
            inclusive=True,
            exact=False,
            type="tuple",
        )
        valid = False
    elif schema.rest is not None:
        for offset, item in enumerate(extra):
            with context.descend(len(schema.items) + offset):
                item_output = yield from walk(schema.rest, item, context)
            if item_output is INVALID:
                valid = False
            else:
                output.append(item_output)
    return tuple(output) if valid else INVALID


def _walk_map(schema: MapSchema, value: Any, context: ValidationContext) -> NodeGenerator:
    if not isinstance(value, Mapping):
        return _report_invalid_type(context, "map", value)

    valid = True
    output: dict[Any, Any] = {}
    for position, (key, item) in enumerate(value.items()):
        with context.descend(_segment_for(key, fallback=position)):
            with context.descend("key"):
                key_output = yield from walk(schema.key_schema, key, context)
            with context.descend("value"):
                item_output = yield from walk(schema.value_schema, item, context)
        if key_output is INVALID or item_output is INVALID:
            valid = False
            continue
        output[_require_hashable(key_output, "Map key")] = item_output
    return output if valid else INVALID


def _walk_union(schema: UnionSchema, value: Any, context: ValidationContext) -> NodeGenerator:
    member_failures = []
    for member in schema.members:
        member_context = context.fork()
        member_output = yield from walk(member, value, member_context)
        if member_output is not INVALID and not member_context.issues:
            return member_output
        member_failures.append(tuple(member_context.issues))

    context.add_issue(
        IssueCode.INVALID_UNION,
        issue_messages.INVALID_UNION_MESSAGE,
        union_errors=tuple(member_failures),
    )
    return INVALID


def _walk_piped(schema: PipedSchema, value: Any, context: ValidationContext) -> NodeGenerator:
    steps: list[TransformStep] = []
    base: Schema = schema
    while isinstance(base, PipedSchema):
        steps.append(base.step)
        base = base.inner
    steps.reverse()

    inner_output = yield from walk(base, value, context)
    if inner_output is INVALID or inner_output is MISSING:
        return inner_output
    return (yield from run_steps(steps, inner_output, context))


def _report_invalid_type(context: ValidationContext, expected: str, value: Any) -> Any:
    received = describe_type(value)
    context.add_issue(
        IssueCode.INVALID_TYPE,
        issue_messages.invalid_type_message(expected, received),
        expected=expected,
        received=received,
    )
    return INVALID


def _require_hashable(output: Any, label: str) -> Any:
    try:
        hash(output)
    except TypeError as exc:
        raise SchemaDefinitionError(
            f"{label} schema produced an unhashable {type(output).__name__} value."
        ) from exc
    return output


def _segment_for(key: Any, *, fallback: PathSegment) -> PathSegment:
    if isinstance(key, str) or (isinstance(key, int) and not isinstance(key, bool)):
        return key
    return fallback
