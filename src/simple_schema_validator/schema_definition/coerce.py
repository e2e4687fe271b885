"""Primitive builders with input coercion enabled, used as `coerce.number()`."""

from __future__ import annotations

from . import schema_builders
from .schema_nodes import PrimitiveSchema


def string() -> PrimitiveSchema:
    return schema_builders.string(coerce=True)


def number() -> PrimitiveSchema:
    return schema_builders.number(coerce=True)


def boolean() -> PrimitiveSchema:
    return schema_builders.boolean(coerce=True)


def date() -> PrimitiveSchema:
    return schema_builders.date(coerce=True)
