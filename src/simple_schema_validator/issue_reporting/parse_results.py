"""Discriminated outcome of a non-throwing parse call."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .issue_models import Issue
from .validation_errors import ValidationError


@dataclass(frozen=True)
class ParseSuccess:
    """Validated (and possibly transformed) output value."""

    data: Any

    @property
    def success(self) -> bool:
        return True


@dataclass(frozen=True)
class ParseFailure:
    """Every issue discovered during the call, wrapped in the aggregate error."""

    error: ValidationError

    @property
    def success(self) -> bool:
        return False

    @property
    def issues(self) -> tuple[Issue, ...]:
        return self.error.issues


ParseResult = ParseSuccess | ParseFailure
