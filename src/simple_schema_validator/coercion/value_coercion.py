"""Conversion of compatible input representations to primitive kinds."""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from datetime import date, datetime
from enum import Enum
from typing import Any

from simple_schema_validator.issue_reporting.issue_messages import MISSING_TYPE_NAME
from simple_schema_validator.schema_definition.schema_nodes import PrimitiveKind

from .missing_values import MISSING

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)
_DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?", re.ASCII)
_BOOLEAN_LITERALS = {"true": True, "false": False}
_TIME_DIRECTIVES = ("%H", "%I", "%M", "%S", "%f", "%p", "%z", "%X", "%c")


class _NotConvertibleType(Enum):
    NOT_CONVERTIBLE = "NOT_CONVERTIBLE"


NOT_CONVERTIBLE = _NotConvertibleType.NOT_CONVERTIBLE


def coerce_value(kind: PrimitiveKind, value: Any, date_formats: Sequence[str] = ()) -> Any:
    """Convert `value` towards `kind`, or return NOT_CONVERTIBLE.

    Values that already have the target type are returned unchanged.
    """
    if kind == PrimitiveKind.STRING:
        return _coerce_string(value)
    if kind == PrimitiveKind.NUMBER:
        return _coerce_number(value)
    if kind == PrimitiveKind.BOOLEAN:
        return _coerce_boolean(value)
    if kind == PrimitiveKind.DATE:
        return _coerce_date(value, date_formats)
    raise AssertionError(f"Unhandled primitive kind: {kind}")


def matches_kind(kind: PrimitiveKind, value: Any) -> bool:
    if kind == PrimitiveKind.STRING:
        return isinstance(value, str)
    if kind == PrimitiveKind.NUMBER:
        return _is_number(value) and not math.isnan(value)
    if kind == PrimitiveKind.BOOLEAN:
        return isinstance(value, bool)
    if kind == PrimitiveKind.DATE:
        return isinstance(value, date)
    raise AssertionError(f"Unhandled primitive kind: {kind}")


def describe_type(value: Any) -> str:
    """Type name used in `received` issue params."""
    if value is MISSING:
        return MISSING_TYPE_NAME
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if _is_number(value):
        return "nan" if math.isnan(value) else "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, date):
        return "date"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list | tuple):
        return "array"
    if isinstance(value, set | frozenset):
        return "set"
    if callable(value):
        return "function"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def _coerce_string(value: Any) -> Any:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if _is_number(value):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return NOT_CONVERTIBLE


def _coerce_number(value: Any) -> Any:
    if _is_number(value):
        return value
    if not isinstance(value, str):
        return NOT_CONVERTIBLE
    text = value.strip()
    if not text:
        return NOT_CONVERTIBLE
    if _INTEGER_PATTERN.fullmatch(text):
        return int(text)
    if _DECIMAL_PATTERN.fullmatch(text):
        return float(text)
    return NOT_CONVERTIBLE


def _coerce_boolean(value: Any) -> Any:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _BOOLEAN_LITERALS.get(value.strip(), NOT_CONVERTIBLE)
    return NOT_CONVERTIBLE


def _coerce_date(value: Any, date_formats: Sequence[str]) -> Any:
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return NOT_CONVERTIBLE
    text = value.strip()
    for parser in (date.fromisoformat, datetime.fromisoformat):
        try:
            return parser(text)
        except ValueError:
            continue
    for date_format in date_formats:
        try:
            parsed = datetime.strptime(text, date_format)
        except ValueError:
            continue
        if any(directive in date_format for directive in _TIME_DIRECTIVES):
            return parsed
        return parsed.date()
    return NOT_CONVERTIBLE
