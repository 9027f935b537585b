"""ViewModel for the single-resource create/edit form.

The VM owns transient form state only: field values, per-field errors, the
delete confirmation flag and the in-flight flag. Network calls, navigation and
toasts live in ``storeadmin.app.resource_form_controller``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..domain.entities import EditMode, FormMode, FormValues, ResourceRecord, mode_for
from ..domain.validation import validate_field, validate_form_values


@dataclass(frozen=True)
class ControllerState:
    is_confirm_dialog_open: bool = False
    is_submitting: bool = False


@dataclass(frozen=True)
class FormTexts:
    """Display strings derived from the form mode."""

    title: str
    description: str
    toast_message: str
    action_label: str


def normalize_label(entity_label: str) -> str:
    return (entity_label or "").strip() or "item"


def texts_for(mode: FormMode, entity_label: str = "color") -> FormTexts:
    label = normalize_label(entity_label)
    capitalized = label[:1].upper() + label[1:]
    if isinstance(mode, EditMode):
        return FormTexts(
            title=f"Edit {label}",
            description=f"Edit a {label}",
            toast_message=f"{capitalized} updated successfully!",
            action_label="Save Changes",
        )
    return FormTexts(
        title=f"Create {label}",
        description=f"Add a new {label}",
        toast_message=f"{capitalized} created successfully!",
        action_label="Create",
    )


class ResourceFormVM:
    """Form state for one record; the mode is fixed at construction."""

    def __init__(
        self,
        record: Optional[ResourceRecord],
        *,
        entity_label: str = "color",
        on_state_changed: Optional[Callable[["ResourceFormVM"], None]] = None,
    ) -> None:
        self.mode: FormMode = mode_for(record)
        self.entity_label = normalize_label(entity_label)
        self.texts = texts_for(self.mode, entity_label)
        self.values = FormValues.from_record(record)
        self.field_errors: Dict[str, str] = {}
        self.is_confirm_dialog_open = False
        self.is_submitting = False
        self.on_state_changed = on_state_changed
        self._submit_attempted = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------
    @property
    def is_edit(self) -> bool:
        return isinstance(self.mode, EditMode)

    @property
    def title(self) -> str:
        return self.texts.title

    @property
    def description(self) -> str:
        return self.texts.description

    @property
    def toast_message(self) -> str:
        return self.texts.toast_message

    @property
    def action_label(self) -> str:
        return self.texts.action_label

    @property
    def delete_available(self) -> bool:
        """The delete trigger is rendered in edit mode only."""
        return self.is_edit

    @property
    def deleted_message(self) -> str:
        label = self.entity_label
        return f"{label[:1].upper()}{label[1:]} successfully deleted!"

    @property
    def delete_blocked_message(self) -> str:
        return f"Make sure you delete all products using this {self.entity_label} in store first."

    @property
    def can_submit(self) -> bool:
        return not self.is_submitting

    @property
    def can_request_delete(self) -> bool:
        return self.delete_available and not self.is_submitting

    @property
    def can_confirm_delete(self) -> bool:
        return self.is_confirm_dialog_open and not self.is_submitting

    @property
    def state(self) -> ControllerState:
        return ControllerState(
            is_confirm_dialog_open=self.is_confirm_dialog_open,
            is_submitting=self.is_submitting,
        )

    # ------------------------------------------------------------------
    # Field editing and validation
    # ------------------------------------------------------------------
    def set_field(self, name: str, value: str) -> None:
        """Store a keystroke; re-validate the field once a submit was attempted."""
        if name not in ("name", "value"):
            raise KeyError(f"Unknown form field '{name}'")
        text = "" if value is None else str(value)
        setattr(self.values, name, text)
        if self._submit_attempted or name in self.field_errors:
            self._apply_field_error(name, validate_field(name, text))
        self._changed()

    def validate(self) -> bool:
        """Validate all fields for a submit attempt; errors stay on the VM."""
        self._submit_attempted = True
        self.field_errors = validate_form_values(self.values)
        self._changed()
        return not self.field_errors

    def error_for(self, name: str) -> Optional[str]:
        return self.field_errors.get(name)

    # ------------------------------------------------------------------
    # Delete confirmation state machine: Closed -> ConfirmOpen -> Closed
    # ------------------------------------------------------------------
    def open_confirm(self) -> bool:
        if not self.can_request_delete:
            return False
        self.is_confirm_dialog_open = True
        self._changed()
        return True

    def close_confirm(self) -> None:
        if not self.is_confirm_dialog_open:
            return
        self.is_confirm_dialog_open = False
        self._changed()

    # ------------------------------------------------------------------
    # In-flight flag
    # ------------------------------------------------------------------
    def begin_submit(self) -> bool:
        """Acquire the in-flight flag; ``False`` when a call is already running."""
        if self.is_submitting:
            return False
        self.is_submitting = True
        self._changed()
        return True

    def end_submit(self) -> None:
        self.is_submitting = False
        self._changed()

    # ------------------------------------------------------------------
    def _apply_field_error(self, name: str, message: Optional[str]) -> None:
        if message:
            self.field_errors[name] = message
        else:
            self.field_errors.pop(name, None)

    def _changed(self) -> None:
        if self.on_state_changed:
            self.on_state_changed(self)


__all__ = ["ControllerState", "FormTexts", "ResourceFormVM", "texts_for"]
