"""Issue and result model exports."""

from .issue_models import Issue, IssueCode, IssuePath, PathSegment, format_path
from .parse_results import ParseFailure, ParseResult, ParseSuccess
from .validation_context import INVALID, ValidationContext
from .validation_errors import FlattenedIssues, SchemaDefinitionError, ValidationError

__all__ = [
    "Issue",
    "IssueCode",
    "IssuePath",
    "PathSegment",
    "format_path",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    "INVALID",
    "ValidationContext",
    "FlattenedIssues",
    "SchemaDefinitionError",
    "ValidationError",
]
