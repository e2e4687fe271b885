"""Immutable schema variants and their chainable modifiers."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any

from simple_schema_validator.issue_reporting.validation_errors import SchemaDefinitionError

if TYPE_CHECKING:
    from simple_schema_validator.configuration.runtime_settings import ParseSettings
    from simple_schema_validator.issue_reporting.parse_results import ParseResult


class PrimitiveKind(str, Enum):
    """Semantic type of a primitive schema."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"


class ConstraintKind(str, Enum):
    """Supported constraint kinds."""

    MIN = "min"
    MAX = "max"
    LENGTH = "length"
    EMAIL = "email"
    URL = "url"
    REGEX = "regex"
    INTEGER = "integer"


class UnknownKeys(str, Enum):
    """Object policy for input keys that are not declared fields."""

    STRIP = "strip"
    PASSTHROUGH = "passthrough"
    STRICT = "strict"


class StepKind(str, Enum):
    """Pipeline step kinds."""

    TRANSFORM = "transform"
    REFINE = "refine"
    SUPER_REFINE = "super_refine"


@dataclass(frozen=True)
class Constraint:
    """One declared check; `value` is the bound or pattern, if any."""

    kind: ConstraintKind
    value: Any = None
    message: str | None = None


@dataclass(frozen=True)
class TransformStep:
    """One post-validation pipeline step."""

    kind: StepKind
    function: Callable[..., Any]
    message: str | None = None


class Schema:
    """Base of every schema variant.

    Modifiers never mutate the receiver; they wrap it or copy it with
    `dataclasses.replace`, sharing every unchanged child schema.
    """

    def optional(self) -> OptionalSchema:
        return OptionalSchema(inner=self)

    def nullable(self) -> NullableSchema:
        return NullableSchema(inner=self)

    def default(self, value: Any) -> DefaultSchema:
        """Use `value` when the input is missing; callables are invoked per parse."""
        return DefaultSchema(inner=self, default_value=value)

    def transform(self, function: Callable[[Any], Any]) -> PipedSchema:
        _require_callable(function, "transform")
        return PipedSchema(
            inner=self,
            step=TransformStep(kind=StepKind.TRANSFORM, function=function),
        )

    def refine(self, check: Callable[[Any], Any], message: str | None = None) -> PipedSchema:
        """Emit one `custom` issue with `message` whenever `check(value)` is falsy."""
        _require_callable(check, "refine")
        return PipedSchema(
            inner=self,
            step=TransformStep(kind=StepKind.REFINE, function=check, message=message),
        )

    def super_refine(self, function: Callable[[Any, Any], Any]) -> PipedSchema:
        """Attach `function(value, ctx) -> value`; it may call `ctx.add_issue` repeatedly."""
        _require_callable(function, "super_refine")
        return PipedSchema(
            inner=self,
            step=TransformStep(kind=StepKind.SUPER_REFINE, function=function),
        )

    def parse(self, value: Any, *, settings: ParseSettings | None = None) -> Any:
        from simple_schema_validator.parse_execution.parse_entrypoints import parse

        return parse(self, value, settings=settings)

    def safe_parse(self, value: Any, *, settings: ParseSettings | None = None) -> ParseResult:
        from simple_schema_validator.parse_execution.parse_entrypoints import safe_parse

        return safe_parse(self, value, settings=settings)

    async def parse_async(self, value: Any, *, settings: ParseSettings | None = None) -> Any:
        from simple_schema_validator.parse_execution.parse_entrypoints import parse_async

        return await parse_async(self, value, settings=settings)

    async def safe_parse_async(
        self, value: Any, *, settings: ParseSettings | None = None
    ) -> ParseResult:
        from simple_schema_validator.parse_execution.parse_entrypoints import safe_parse_async

        return await safe_parse_async(self, value, settings=settings)


class _SizeConstraints:
    """`min`/`max`/`length` modifiers shared by primitives, arrays and sets."""

    constraints: tuple[Constraint, ...]

    def min(self, bound: Any, message: str | None = None) -> Any:
        return self._with_constraint(
            Constraint(ConstraintKind.MIN, self._check_bound(bound), message)
        )

    def max(self, bound: Any, message: str | None = None) -> Any:
        return self._with_constraint(
            Constraint(ConstraintKind.MAX, self._check_bound(bound), message)
        )

    def length(self, size: int, message: str | None = None) -> Any:
        return self._with_constraint(
            Constraint(ConstraintKind.LENGTH, self._check_size(size, "length"), message)
        )

    def nonempty(self, message: str | None = None) -> Any:
        return self.min(1, message)

    def _with_constraint(self, constraint: Constraint) -> Any:
        return replace(self, constraints=(*self.constraints, constraint))  # type: ignore[type-var]

    def _check_bound(self, bound: Any) -> Any:
        return self._check_size(bound, "bound")

    @staticmethod
    def _check_size(size: Any, label: str) -> int:
        if isinstance(size, bool) or not isinstance(size, int):
            raise SchemaDefinitionError(f"Size {label} must be an integer, got {size!r}.")
        if size < 0:
            raise SchemaDefinitionError(f"Size {label} must not be negative, got {size}.")
        return size


@dataclass(frozen=True)
class PrimitiveSchema(_SizeConstraints, Schema):
    """Leaf validator for one primitive kind."""

    kind: PrimitiveKind
    constraints: tuple[Constraint, ...] = ()
    coerce: bool = False

    def email(self, message: str | None = None) -> PrimitiveSchema:
        self._require_kind("email", PrimitiveKind.STRING)
        return self._with_constraint(Constraint(ConstraintKind.EMAIL, None, message))

    def url(self, message: str | None = None) -> PrimitiveSchema:
        self._require_kind("url", PrimitiveKind.STRING)
        return self._with_constraint(Constraint(ConstraintKind.URL, None, message))

    def regex(self, pattern: str | re.Pattern[str], message: str | None = None) -> PrimitiveSchema:
        self._require_kind("regex", PrimitiveKind.STRING)
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return self._with_constraint(Constraint(ConstraintKind.REGEX, compiled, message))

    def integer(self, message: str | None = None) -> PrimitiveSchema:
        self._require_kind("integer", PrimitiveKind.NUMBER)
        return self._with_constraint(Constraint(ConstraintKind.INTEGER, None, message))

    def length(self, size: int, message: str | None = None) -> PrimitiveSchema:
        self._require_kind("length", PrimitiveKind.STRING)
        return super().length(size, message)

    def nonempty(self, message: str | None = None) -> PrimitiveSchema:
        self._require_kind("nonempty", PrimitiveKind.STRING)
        return super().nonempty(message)

    def _check_bound(self, bound: Any) -> Any:
        if self.kind == PrimitiveKind.STRING:
            return self._check_size(bound, "bound")
        if self.kind == PrimitiveKind.NUMBER:
            if isinstance(bound, bool) or not isinstance(bound, int | float):
                raise SchemaDefinitionError(f"Number bounds must be numeric, got {bound!r}.")
            return bound
        if self.kind == PrimitiveKind.DATE:
            if not isinstance(bound, date):
                raise SchemaDefinitionError(f"Date bounds must be dates, got {bound!r}.")
            return bound
        raise SchemaDefinitionError(f"{self.kind.value} schemas do not support bounds.")

    def _require_kind(self, modifier: str, kind: PrimitiveKind) -> None:
        if self.kind != kind:
            raise SchemaDefinitionError(
                f"{modifier}() is only available on {kind.value} schemas, not {self.kind.value}."
            )


@dataclass(frozen=True)
class ObjectSchema(Schema):
    """Named fields validated in declaration order."""

    fields: tuple[tuple[str, Schema], ...]
    unknown_keys: UnknownKeys = UnknownKeys.STRIP

    @property
    def shape(self) -> dict[str, Schema]:
        return dict(self.fields)

    def strict(self) -> ObjectSchema:
        return replace(self, unknown_keys=UnknownKeys.STRICT)

    def passthrough(self) -> ObjectSchema:
        return replace(self, unknown_keys=UnknownKeys.PASSTHROUGH)

    def strip(self) -> ObjectSchema:
        return replace(self, unknown_keys=UnknownKeys.STRIP)

    def extend(self, fields: Mapping[str, Schema]) -> ObjectSchema:
        """Add fields; a redeclared name keeps its position and takes the new schema."""
        merged = dict(self.fields)
        merged.update(normalize_fields(fields))
        return replace(self, fields=tuple(merged.items()))

    def pick(self, *names: str) -> ObjectSchema:
        self._require_known(names)
        return replace(self, fields=tuple((name, s) for name, s in self.fields if name in names))

    def omit(self, *names: str) -> ObjectSchema:
        self._require_known(names)
        return replace(
            self, fields=tuple((name, s) for name, s in self.fields if name not in names)
        )

    def partial(self) -> ObjectSchema:
        return replace(
            self,
            fields=tuple(
                (name, s if isinstance(s, OptionalSchema) else s.optional())
                for name, s in self.fields
            ),
        )

    def _require_known(self, names: Iterable[str]) -> None:
        unknown = [name for name in names if name not in self.shape]
        if unknown:
            raise SchemaDefinitionError(f"Unknown object field(s): {', '.join(unknown)}")


@dataclass(frozen=True)
class ArraySchema(_SizeConstraints, Schema):
    element: Schema
    constraints: tuple[Constraint, ...] = ()


@dataclass(frozen=True)
class SetSchema(_SizeConstraints, Schema):
    element: Schema
    constraints: tuple[Constraint, ...] = ()


@dataclass(frozen=True)
class TupleSchema(Schema):
    """Positional schemas with an optional schema for extra items."""

    items: tuple[Schema, ...]
    rest: Schema | None = None

    def with_rest(self, rest: Schema) -> TupleSchema:
        return replace(self, rest=require_schema(rest, "tuple rest"))


@dataclass(frozen=True)
class MapSchema(Schema):
    key_schema: Schema
    value_schema: Schema


@dataclass(frozen=True)
class UnionSchema(Schema):
    """Members tried in declared order; the first full success wins."""

    members: tuple[Schema, ...]


@dataclass(frozen=True)
class OptionalSchema(Schema):
    inner: Schema


@dataclass(frozen=True)
class NullableSchema(Schema):
    inner: Schema


@dataclass(frozen=True)
class DefaultSchema(Schema):
    inner: Schema
    default_value: Any


@dataclass(frozen=True)
class PipedSchema(Schema):
    """Runs `step` on the output of `inner` once `inner` succeeded."""

    inner: Schema
    step: TransformStep


def require_schema(candidate: Any, label: str) -> Schema:
    if not isinstance(candidate, Schema):
        raise SchemaDefinitionError(f"{label} must be a schema, got {type(candidate).__name__}.")
    return candidate


def normalize_fields(fields: Mapping[str, Schema]) -> tuple[tuple[str, Schema], ...]:
    if not isinstance(fields, Mapping):
        raise SchemaDefinitionError("Object fields must be a mapping of name to schema.")
    normalized: list[tuple[str, Schema]] = []
    for name, child in fields.items():
        if not isinstance(name, str):
            raise SchemaDefinitionError(f"Object field names must be strings, got {name!r}.")
        normalized.append((name, require_schema(child, f"Field '{name}'")))
    return tuple(normalized)


def _require_callable(function: Any, modifier: str) -> None:
    if not callable(function):
        raise SchemaDefinitionError(f"{modifier}() requires a callable.")
