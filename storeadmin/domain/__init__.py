"""Domain package exports for value objects and form modes."""

from .entities import (
    CreateMode,
    EditMode,
    FormMode,
    FormValues,
    ResourceId,
    ResourceRecord,
    ResourceRoute,
    StoreId,
    mode_for,
)
from .validation import validate_field, validate_form_values

__all__ = [
    "CreateMode",
    "EditMode",
    "FormMode",
    "FormValues",
    "ResourceId",
    "ResourceRecord",
    "ResourceRoute",
    "StoreId",
    "mode_for",
    "validate_field",
    "validate_form_values",
]
