"""Execution of transform and refinement steps on a validated value.

Step runners are generators: a step whose function returns an awaitable has
that awaitable yielded to the driving executor, which sends the awaited
result back. Synchronous steps never yield.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Generator, Sequence
from typing import Any

from simple_schema_validator.configuration.runtime_settings import RefinementPolicy
from simple_schema_validator.issue_reporting import issue_messages
from simple_schema_validator.issue_reporting.issue_models import IssueCode
from simple_schema_validator.issue_reporting.validation_context import INVALID, ValidationContext
from simple_schema_validator.schema_definition.schema_nodes import StepKind, TransformStep

from .refinement_context import RefinementContext

_LOGGER = logging.getLogger(__name__)

StepGenerator = Generator[Any, Any, Any]


def run_steps(
    steps: Sequence[TransformStep], value: Any, context: ValidationContext
) -> StepGenerator:
    """Run `steps` in order on `value`; return the final value or INVALID.

    Under the aggregate policy every step runs even after one emitted issues;
    under fail-fast the pipeline stops at the first step that emitted any.
    """
    failed = False
    for index, step in enumerate(steps):
        issues_before = context.issue_count
        value = yield from _run_step(step, value, context)
        if context.issue_count == issues_before:
            continue
        failed = True
        if context.settings.refinement_policy == RefinementPolicy.FAIL_FAST:
            _LOGGER.debug(
                "Stopping pipeline after step %d of %d (%s)", index + 1, len(steps), step.kind.value
            )
            break
    return INVALID if failed else value


def _run_step(step: TransformStep, value: Any, context: ValidationContext) -> StepGenerator:
    if step.kind == StepKind.TRANSFORM:
        return (yield from _settle(step.function(value)))

    if step.kind == StepKind.REFINE:
        verdict = yield from _settle(step.function(value))
        if not verdict:
            context.add_issue(IssueCode.CUSTOM, step.message or issue_messages.CUSTOM_MESSAGE)
        return value

    if step.kind == StepKind.SUPER_REFINE:
        refined = yield from _settle(step.function(value, RefinementContext(context)))
        return value if refined is None else refined

    raise AssertionError(f"Unhandled step kind: {step.kind}")


def _settle(result: Any) -> StepGenerator:
    if inspect.isawaitable(result):
        result = yield result
    return result
