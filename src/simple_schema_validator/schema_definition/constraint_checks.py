"""Evaluation of declared constraints against a type-resolved value."""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import UTC, date, datetime, time
from typing import Any
from urllib.parse import urlsplit

from simple_schema_validator.issue_reporting import issue_messages
from simple_schema_validator.issue_reporting.issue_models import IssueCode
from simple_schema_validator.issue_reporting.validation_context import ValidationContext

from .schema_nodes import Constraint, ConstraintKind

_EMAIL_PATTERN = re.compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-\.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    re.IGNORECASE,
)


def check_constraints(
    origin: str,
    value: Any,
    constraints: Sequence[Constraint],
    context: ValidationContext,
) -> bool:
    """Run every constraint in declared order; return True when none failed.

    `origin` names what is measured: "string", "array", "set" by size,
    "number" by value and "date" chronologically.
    """
    passed = True
    for constraint in constraints:
        if not _check_constraint(origin, value, constraint, context):
            passed = False
    return passed


def chronological_key(value: date) -> datetime:
    """Comparable instant for dates and naive or aware datetimes."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(UTC).replace(tzinfo=None)
        return value
    return datetime.combine(value, time())


def _check_constraint(
    origin: str, value: Any, constraint: Constraint, context: ValidationContext
) -> bool:
    if constraint.kind in (ConstraintKind.MIN, ConstraintKind.MAX, ConstraintKind.LENGTH):
        return _check_bound(origin, value, constraint, context)
    if constraint.kind == ConstraintKind.EMAIL:
        return _check_format(
            _EMAIL_PATTERN.fullmatch(value) is not None, "email", constraint, context
        )
    if constraint.kind == ConstraintKind.URL:
        return _check_format(_is_url(value), "url", constraint, context)
    if constraint.kind == ConstraintKind.REGEX:
        return _check_format(
            constraint.value.search(value) is not None, "regex", constraint, context
        )
    if constraint.kind == ConstraintKind.INTEGER:
        if isinstance(value, int) or float(value).is_integer():
            return True
        context.add_issue(
            IssueCode.INVALID_TYPE,
            constraint.message or issue_messages.NOT_INTEGER_MESSAGE,
            expected="integer",
            received="float",
        )
        return False
    raise AssertionError(f"Unhandled constraint kind: {constraint.kind}")


def _check_bound(
    origin: str, value: Any, constraint: Constraint, context: ValidationContext
) -> bool:
    measured = _measure(origin, value)
    bound = constraint.value
    comparable_bound = chronological_key(bound) if origin == "date" else bound
    exact = constraint.kind == ConstraintKind.LENGTH

    if constraint.kind in (ConstraintKind.MIN, ConstraintKind.LENGTH) and (
        measured < comparable_bound
    ):
        context.add_issue(
            IssueCode.TOO_SMALL,
            constraint.message or issue_messages.too_small_message(origin, bound, exact=exact),
            minimum=bound,
            inclusive=True,
            exact=exact,
            type=origin,
        )
        return False
    if constraint.kind in (ConstraintKind.MAX, ConstraintKind.LENGTH) and (
        measured > comparable_bound
    ):
        context.add_issue(
            IssueCode.TOO_BIG,
            constraint.message or issue_messages.too_big_message(origin, bound, exact=exact),
            maximum=bound,
            inclusive=True,
            exact=exact,
            type=origin,
        )
        return False
    return True


def _check_format(
    matched: bool, validation: str, constraint: Constraint, context: ValidationContext
) -> bool:
    if matched:
        return True
    context.add_issue(
        IssueCode.INVALID_STRING,
        constraint.message or issue_messages.invalid_string_message(validation),
        validation=validation,
    )
    return False


def _measure(origin: str, value: Any) -> Any:
    if origin == "number":
        return value
    if origin == "date":
        return chronological_key(value)
    return len(value)


def _is_url(value: str) -> bool:
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    return bool(parts.scheme) and bool(parts.netloc)
