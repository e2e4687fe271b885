"""Coercion and default value exports."""

from .missing_values import MISSING, is_missing, resolve_default
from .value_coercion import NOT_CONVERTIBLE, coerce_value, describe_type, matches_kind

__all__ = [
    "MISSING",
    "is_missing",
    "resolve_default",
    "NOT_CONVERTIBLE",
    "coerce_value",
    "describe_type",
    "matches_kind",
]
