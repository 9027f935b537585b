"""Field rules for the resource form.

Both fields are required strings with a minimum length of one character.
Values are not trimmed, so a single space passes.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from .entities import FormValues

FieldErrors = Dict[str, str]

MIN_LENGTH_MESSAGE = "String must contain at least {min} character(s)"


def _min_length(minimum: int) -> Callable[[object], Optional[str]]:
    def rule(value: object) -> Optional[str]:
        if not isinstance(value, str):
            return "Expected string"
        if len(value) < minimum:
            return MIN_LENGTH_MESSAGE.format(min=minimum)
        return None

    return rule


FIELD_RULES: Tuple[Tuple[str, Callable[[object], Optional[str]]], ...] = (
    ("name", _min_length(1)),
    ("value", _min_length(1)),
)


def validate_field(field_name: str, value: object) -> Optional[str]:
    """Return the error message for one field, or ``None`` when it passes."""
    for name, rule in FIELD_RULES:
        if name == field_name:
            return rule(value)
    raise KeyError(f"Unknown form field '{field_name}'")


def validate_form_values(values: FormValues) -> FieldErrors:
    """Run every field rule and collect violations keyed by field name."""
    errors: FieldErrors = {}
    for name, rule in FIELD_RULES:
        message = rule(getattr(values, name))
        if message:
            errors[name] = message
    return errors


__all__ = ["FIELD_RULES", "FieldErrors", "MIN_LENGTH_MESSAGE", "validate_field", "validate_form_values"]
