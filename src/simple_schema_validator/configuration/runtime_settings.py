"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RefinementPolicy(str, Enum):
    """What a pipeline does after a step emitted an issue."""

    AGGREGATE = "aggregate"
    FAIL_FAST = "fail_fast"


@dataclass(frozen=True)
class ParseSettings:
    """Per-call parse settings."""

    refinement_policy: RefinementPolicy = RefinementPolicy.AGGREGATE
    date_formats: tuple[str, ...] = ()


DEFAULT_SETTINGS = ParseSettings()
