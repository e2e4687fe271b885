"""Default issue message wording."""

from __future__ import annotations

from datetime import date

MISSING_TYPE_NAME = "missing"

_COUNTED_UNITS = {
    "string": "character(s)",
    "array": "element(s)",
    "set": "element(s)",
    "tuple": "element(s)",
}


def invalid_type_message(expected: str, received: str) -> str:
    if received == MISSING_TYPE_NAME:
        return "Required"
    return f"Expected {expected}, received {received}"


def too_small_message(origin: str, minimum: object, *, exact: bool = False) -> str:
    unit = _COUNTED_UNITS.get(origin)
    if unit is not None:
        quantifier = "exactly" if exact else "at least"
        return f"{origin.capitalize()} must contain {quantifier} {minimum} {unit}"
    return f"{origin.capitalize()} must be greater than or equal to {_display_bound(minimum)}"


def too_big_message(origin: str, maximum: object, *, exact: bool = False) -> str:
    unit = _COUNTED_UNITS.get(origin)
    if unit is not None:
        quantifier = "exactly" if exact else "at most"
        return f"{origin.capitalize()} must contain {quantifier} {maximum} {unit}"
    return f"{origin.capitalize()} must be less than or equal to {_display_bound(maximum)}"


def invalid_string_message(validation: str) -> str:
    if validation == "regex":
        return "Invalid"
    return f"Invalid {validation}"


def unrecognized_key_message(key: object) -> str:
    return f"Unrecognized key in object: {key!r}"


INVALID_UNION_MESSAGE = "Invalid input"
CUSTOM_MESSAGE = "Invalid input"
NOT_INTEGER_MESSAGE = "Expected integer, received float"


def _display_bound(bound: object) -> str:
    if isinstance(bound, date):
        return bound.isoformat()
    return str(bound)
