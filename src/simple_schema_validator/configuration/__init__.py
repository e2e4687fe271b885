"""Configuration domain exports."""

from .loader import ConfigurationError, load_parse_settings, parse_settings_mapping
from .runtime_settings import DEFAULT_SETTINGS, ParseSettings, RefinementPolicy

__all__ = [
    "ParseSettings",
    "RefinementPolicy",
    "DEFAULT_SETTINGS",
    "ConfigurationError",
    "load_parse_settings",
    "parse_settings_mapping",
]
