"""Aggregate validation error raised at the parse call boundary."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .issue_models import Issue, format_path


class SchemaDefinitionError(Exception):
    """Raised for malformed schema definitions (programmer errors)."""


@dataclass(frozen=True)
class FlattenedIssues:
    """Issue messages grouped by the top-level field they belong to."""

    form_errors: tuple[str, ...]
    field_errors: dict[str, tuple[str, ...]]


class ValidationError(Exception):
    """Raised by throwing parse mode; carries every issue of the call in order."""

    def __init__(self, issues: Sequence[Issue]) -> None:
        self.issues: tuple[Issue, ...] = tuple(issues)
        super().__init__(self._summary())

    @property
    def errors(self) -> tuple[Issue, ...]:
        """Alias of `issues`."""
        return self.issues

    @property
    def messages(self) -> tuple[str, ...]:
        return tuple(issue.message for issue in self.issues)

    def flatten(self) -> FlattenedIssues:
        """Group messages by first path segment; root-level issues become form errors."""
        form_errors: list[str] = []
        field_errors: dict[str, list[str]] = {}
        for issue in self.issues:
            if not issue.path:
                form_errors.append(issue.message)
                continue
            field_errors.setdefault(str(issue.path[0]), []).append(issue.message)
        return FlattenedIssues(
            form_errors=tuple(form_errors),
            field_errors={key: tuple(messages) for key, messages in field_errors.items()},
        )

    def _summary(self) -> str:
        if not self.issues:
            return "Validation failed."
        lines = [f"Validation failed with {len(self.issues)} issue(s):"]
        for issue in self.issues:
            location = format_path(issue.path) or "<root>"
            lines.append(f"  - {location}: {issue.message} ({issue.code.value})")
        return "\n".join(lines)
