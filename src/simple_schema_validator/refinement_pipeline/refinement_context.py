"""Issue-emitting handle passed to refinement steps."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType

from simple_schema_validator.issue_reporting import issue_messages
from simple_schema_validator.issue_reporting.issue_models import Issue, IssueCode, PathSegment
from simple_schema_validator.issue_reporting.validation_context import ValidationContext


class RefinementContext:
    """Scoped to the path of the value being refined when the step started."""

    def __init__(self, context: ValidationContext) -> None:
        self._context = context
        self._path: tuple[PathSegment, ...] = tuple(context.path)
        self._emitted = 0

    @property
    def path(self) -> tuple[PathSegment, ...]:
        return self._path

    @property
    def issue_count(self) -> int:
        """Issues emitted through this handle so far."""
        return self._emitted

    def add_issue(
        self,
        message: str = issue_messages.CUSTOM_MESSAGE,
        *,
        code: IssueCode = IssueCode.CUSTOM,
        path: Sequence[PathSegment] = (),
        **params: object,
    ) -> Issue:
        issue = Issue(
            code=IssueCode(code),
            path=(*self._path, *path),
            message=message,
            params=MappingProxyType(dict(params)),
        )
        self._context.record(issue)
        self._emitted += 1
        return issue
