"""Parse executor exports."""

from .parse_entrypoints import parse, parse_async, safe_parse, safe_parse_async
from .schema_traversal import validate_primitive, walk

__all__ = [
    "parse",
    "parse_async",
    "safe_parse",
    "safe_parse_async",
    "validate_primitive",
    "walk",
]
