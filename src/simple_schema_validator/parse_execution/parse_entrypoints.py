"""Throwing and non-throwing parse entry points, synchronous and asynchronous."""

from __future__ import annotations

import inspect
import logging
from typing import Any

from simple_schema_validator.coercion.missing_values import MISSING
from simple_schema_validator.configuration.runtime_settings import DEFAULT_SETTINGS, ParseSettings
from simple_schema_validator.issue_reporting.parse_results import (
    ParseFailure,
    ParseResult,
    ParseSuccess,
)
from simple_schema_validator.issue_reporting.validation_context import ValidationContext
from simple_schema_validator.issue_reporting.validation_errors import (
    SchemaDefinitionError,
    ValidationError,
)
from simple_schema_validator.schema_definition.schema_nodes import Schema, require_schema

from .schema_traversal import walk

_LOGGER = logging.getLogger(__name__)


def parse(schema: Schema, value: Any, *, settings: ParseSettings | None = None) -> Any:
    """Return the validated value or raise `ValidationError` carrying every issue."""
    return _unwrap(safe_parse(schema, value, settings=settings))


def safe_parse(schema: Schema, value: Any, *, settings: ParseSettings | None = None) -> ParseResult:
    """Return `ParseSuccess` or `ParseFailure`; validation failures never raise.

    Raises:
      SchemaDefinitionError: If the schema is malformed or contains an
        asynchronous pipeline step.
    """
    context = _new_context(schema, settings)
    traversal = walk(schema, value, context)
    try:
        pending = next(traversal)
    except StopIteration as stop:
        return _build_result(schema, stop.value, context)

    if inspect.iscoroutine(pending):
        pending.close()
    traversal.close()
    raise SchemaDefinitionError(
        "Schema contains an asynchronous step; use parse_async() or safe_parse_async()."
    )


async def parse_async(
    schema: Schema, value: Any, *, settings: ParseSettings | None = None
) -> Any:
    """Asynchronous `parse`; asynchronous steps are awaited one at a time in traversal order."""
    return _unwrap(await safe_parse_async(schema, value, settings=settings))


async def safe_parse_async(
    schema: Schema, value: Any, *, settings: ParseSettings | None = None
) -> ParseResult:
    context = _new_context(schema, settings)
    traversal = walk(schema, value, context)
    awaited: Any = None
    try:
        while True:
            pending = traversal.send(awaited)
            awaited = await pending
    except StopIteration as stop:
        return _build_result(schema, stop.value, context)
    finally:
        traversal.close()


def _new_context(schema: Schema, settings: ParseSettings | None) -> ValidationContext:
    require_schema(schema, "Parsed schema")
    return ValidationContext(settings=settings or DEFAULT_SETTINGS)


def _build_result(schema: Schema, output: Any, context: ValidationContext) -> ParseResult:
    if context.issues:
        _LOGGER.debug(
            "%s rejected input with %d issue(s)", type(schema).__name__, len(context.issues)
        )
        return ParseFailure(error=ValidationError(context.issues))
    _LOGGER.debug("%s accepted input", type(schema).__name__)
    return ParseSuccess(data=None if output is MISSING else output)


def _unwrap(result: ParseResult) -> Any:
    if isinstance(result, ParseFailure):
        raise result.error
    return result.data
