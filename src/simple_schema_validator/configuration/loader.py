"""Parse settings loader service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import ParseSettings, RefinementPolicy

_LOGGER = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Raised when the settings file is invalid."""


def load_parse_settings(config_path: Path | str) -> ParseSettings:
    """Load parse settings from a YAML or JSON file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    settings = parse_settings_mapping({} if parsed is None else parsed)
    _LOGGER.debug("Loaded parse settings from %s", path.resolve())
    return settings


def parse_settings_mapping(parsed: Any) -> ParseSettings:
    """Build settings from an already-decoded configuration document."""
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    section = parsed.get("parsing")
    if section is None:
        return ParseSettings()
    if not isinstance(section, Mapping):
        raise ConfigurationError("Configuration section 'parsing' must be a mapping.")

    return ParseSettings(
        refinement_policy=_parse_refinement_policy(section.get("refinement_policy")),
        date_formats=_parse_date_formats(section.get("date_formats")),
    )


def _parse_refinement_policy(value: Any) -> RefinementPolicy:
    if value is None:
        return RefinementPolicy.AGGREGATE
    if not isinstance(value, str):
        raise ConfigurationError("parsing.refinement_policy must be a string.")
    normalized = value.strip().lower().replace("-", "_")
    try:
        return RefinementPolicy(normalized)
    except ValueError as exc:
        allowed = ", ".join(policy.value for policy in RefinementPolicy)
        raise ConfigurationError(
            f"parsing.refinement_policy must be one of: {allowed}. Got '{value}'."
        ) from exc


def _parse_date_formats(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        formats: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError("parsing.date_formats entries must be strings.")
            stripped = item.strip()
            if stripped:
                formats.append(stripped)
        return tuple(formats)
    raise ConfigurationError("parsing.date_formats must be a string or list of strings.")
