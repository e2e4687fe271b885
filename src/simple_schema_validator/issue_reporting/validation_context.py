"""Per-call issue and path accumulator."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType

from simple_schema_validator.configuration.runtime_settings import ParseSettings

from .issue_models import Issue, IssueCode, PathSegment


class _InvalidType(Enum):
    INVALID = "INVALID"

    def __repr__(self) -> str:
        return "INVALID"


INVALID = _InvalidType.INVALID
"""Result of a branch that recorded at least one issue and produced no value."""


@dataclass
class ValidationContext:
    """Mutable collector owned by exactly one parse call.

    The path is a stack: `descend` pushes one segment and always pops it again,
    so sibling branches never observe each other's segments.
    """

    settings: ParseSettings
    path: list[PathSegment] = field(default_factory=list)
    issues: list[Issue] = field(default_factory=list)

    @property
    def issue_count(self) -> int:
        return len(self.issues)

    @contextmanager
    def descend(self, segment: PathSegment) -> Iterator[None]:
        self.path.append(segment)
        try:
            yield
        finally:
            self.path.pop()

    def add_issue(
        self,
        code: IssueCode,
        message: str,
        *,
        path: Sequence[PathSegment] = (),
        **params: object,
    ) -> Issue:
        issue = Issue(
            code=code,
            path=(*self.path, *path),
            message=message,
            params=MappingProxyType(dict(params)),
        )
        self.issues.append(issue)
        return issue

    def record(self, issue: Issue) -> None:
        self.issues.append(issue)

    def fork(self) -> ValidationContext:
        """Return an empty context rooted at the current path with the same settings."""
        return ValidationContext(settings=self.settings, path=list(self.path))
