"""The absent-input sentinel and default value resolution."""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any


class _MissingType(Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _MissingType.MISSING
"""Input that is absent altogether, as opposed to an explicit `None`."""


def is_missing(value: Any) -> bool:
    return value is MISSING


def resolve_default(default_value: Any) -> Any:
    """Return a fresh default: call factories, deep-copy plain values.

    Parse outputs never alias the default object stored on the schema.
    """
    if callable(default_value):
        return default_value()
    return copy.deepcopy(default_value)
