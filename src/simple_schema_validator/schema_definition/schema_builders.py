"""Schema construction entry points."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence

from simple_schema_validator.issue_reporting.validation_errors import SchemaDefinitionError

from .schema_nodes import (
    ArraySchema,
    MapSchema,
    ObjectSchema,
    PrimitiveKind,
    PrimitiveSchema,
    Schema,
    SetSchema,
    TupleSchema,
    UnionSchema,
    UnknownKeys,
    normalize_fields,
    require_schema,
)


def string(*, coerce: bool = False) -> PrimitiveSchema:
    return PrimitiveSchema(kind=PrimitiveKind.STRING, coerce=coerce)


def number(*, coerce: bool = False) -> PrimitiveSchema:
    return PrimitiveSchema(kind=PrimitiveKind.NUMBER, coerce=coerce)


def boolean(*, coerce: bool = False) -> PrimitiveSchema:
    return PrimitiveSchema(kind=PrimitiveKind.BOOLEAN, coerce=coerce)


def date(*, coerce: bool = False) -> PrimitiveSchema:
    return PrimitiveSchema(kind=PrimitiveKind.DATE, coerce=coerce)


def object_(
    fields: Mapping[str, Schema], *, unknown_keys: UnknownKeys = UnknownKeys.STRIP
) -> ObjectSchema:
    """Build an object schema; field order is the validation and output order."""
    return ObjectSchema(fields=normalize_fields(fields), unknown_keys=UnknownKeys(unknown_keys))


def array(element: Schema) -> ArraySchema:
    return ArraySchema(element=require_schema(element, "Array element"))


def set_(element: Schema) -> SetSchema:
    return SetSchema(element=require_schema(element, "Set element"))


def tuple_(items: Sequence[Schema], rest: Schema | None = None) -> TupleSchema:
    checked = tuple(
        require_schema(item, f"Tuple item {index}") for index, item in enumerate(items)
    )
    return TupleSchema(
        items=checked,
        rest=None if rest is None else require_schema(rest, "Tuple rest"),
    )


def map_(key: Schema, value: Schema) -> MapSchema:
    return MapSchema(
        key_schema=require_schema(key, "Map key"),
        value_schema=require_schema(value, "Map value"),
    )


def union(members: Iterable[Schema]) -> UnionSchema:
    checked = tuple(
        require_schema(member, f"Union member {index}") for index, member in enumerate(members)
    )
    if not checked:
        raise SchemaDefinitionError("A union requires at least one member.")
    return UnionSchema(members=checked)
