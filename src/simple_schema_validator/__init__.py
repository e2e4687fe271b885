"""Declarative schema validation with coercion, refinement pipelines and issue aggregation.

Usage:
    import simple_schema_validator as v

    login = v.object_({
        "username": v.string().email(),
        "password": v.string().min(8).max(20),
    })
    result = v.safe_parse(login, {"username": "grace@example.com", "password": "grace123"})
"""

import logging

from .coercion import MISSING
from .configuration import (
    ConfigurationError,
    ParseSettings,
    RefinementPolicy,
    load_parse_settings,
)
from .issue_reporting import (
    FlattenedIssues,
    Issue,
    IssueCode,
    ParseFailure,
    ParseResult,
    ParseSuccess,
    SchemaDefinitionError,
    ValidationError,
)
from .parse_execution import parse, parse_async, safe_parse, safe_parse_async
from .refinement_pipeline import RefinementContext
from .schema_definition import (
    ArraySchema,
    DefaultSchema,
    MapSchema,
    NullableSchema,
    ObjectSchema,
    OptionalSchema,
    PipedSchema,
    PrimitiveKind,
    PrimitiveSchema,
    Schema,
    SetSchema,
    TupleSchema,
    UnionSchema,
    UnknownKeys,
    array,
    boolean,
    coerce,
    date,
    map_,
    number,
    object_,
    set_,
    string,
    tuple_,
    union,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Builders
    "string",
    "number",
    "boolean",
    "date",
    "object_",
    "array",
    "set_",
    "tuple_",
    "map_",
    "union",
    "coerce",
    "MISSING",
    # Schema variants
    "Schema",
    "PrimitiveKind",
    "PrimitiveSchema",
    "ObjectSchema",
    "UnknownKeys",
    "ArraySchema",
    "SetSchema",
    "TupleSchema",
    "MapSchema",
    "UnionSchema",
    "OptionalSchema",
    "NullableSchema",
    "DefaultSchema",
    "PipedSchema",
    "RefinementContext",
    # Execution
    "parse",
    "safe_parse",
    "parse_async",
    "safe_parse_async",
    # Issues and results
    "Issue",
    "IssueCode",
    "ParseSuccess",
    "ParseFailure",
    "ParseResult",
    "FlattenedIssues",
    "ValidationError",
    "SchemaDefinitionError",
    # Configuration
    "ParseSettings",
    "RefinementPolicy",
    "ConfigurationError",
    "load_parse_settings",
]
