"""Issue reporting entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any

PathSegment = str | int
IssuePath = tuple[PathSegment, ...]


class IssueCode(str, Enum):
    """Kinds of validation issues."""

    INVALID_TYPE = "invalid_type"
    TOO_SMALL = "too_small"
    TOO_BIG = "too_big"
    INVALID_STRING = "invalid_string"
    INVALID_UNION = "invalid_union"
    UNRECOGNIZED_KEYS = "unrecognized_keys"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Issue:
    """One structured validation diagnostic.

    `path` is relative to the root value of the parse call. `params` holds the
    code-specific payload, e.g. `expected`/`received` for `invalid_type` or
    `minimum`/`inclusive` for `too_small`.
    """

    code: IssueCode
    path: IssuePath
    message: str
    params: Mapping[str, object] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the flat inspectable shape `{code, path, message, **params}`."""
        payload: dict[str, Any] = {
            "code": self.code.value,
            "path": list(self.path),
            "message": self.message,
        }
        for key, value in self.params.items():
            payload[key] = _plain_param(value)
        return payload


def _plain_param(value: object) -> object:
    if isinstance(value, Issue):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_plain_param(item) for item in value]
    return value


def format_path(path: IssuePath) -> str:
    """Render a path as dotted text, with integer segments in brackets."""
    rendered = ""
    for segment in path:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        else:
            rendered += segment if not rendered else f".{segment}"
    return rendered
