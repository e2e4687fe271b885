"""Schema type model and builder exports."""

from . import coerce
from .constraint_checks import check_constraints, chronological_key
from .schema_builders import (
    array,
    boolean,
    date,
    map_,
    number,
    object_,
    set_,
    string,
    tuple_,
    union,
)
from .schema_nodes import (
    ArraySchema,
    Constraint,
    ConstraintKind,
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
    StepKind,
    TransformStep,
    TupleSchema,
    UnionSchema,
    UnknownKeys,
)

__all__ = [
    "coerce",
    "check_constraints",
    "chronological_key",
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
    "Schema",
    "PrimitiveKind",
    "PrimitiveSchema",
    "Constraint",
    "ConstraintKind",
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
    "StepKind",
    "TransformStep",
]
