"""Confirmation dialog gating destructive actions."""

from __future__ import annotations

from typing import Any, Callable

from nicegui import ui


class AlertModal:
    """Modal with Cancel/Continue buttons.

    The modal keeps no state of its own: the page calls ``render`` with the
    current ``is_open``/``loading`` flags from the form VM.
    """

    def __init__(
        self,
        *,
        on_close: Callable[[], Any],
        on_confirm: Callable[[], Any],
        title: str = "Are you sure?",
        description: str = "This action cannot be undone.",
    ) -> None:
        with ui.dialog().props("persistent") as self.dialog, ui.card().classes("q-pa-md"):
            ui.label(title).classes("text-h6")
            ui.label(description).classes("text-body2")
            with ui.row().classes("w-full justify-end q-gutter-sm q-pt-md"):
                self.cancel_button = ui.button("Cancel", on_click=on_close).props("outline")
                self.confirm_button = ui.button("Continue", color="negative", on_click=on_confirm)

    def render(self, *, is_open: bool, loading: bool) -> None:
        self.cancel_button.set_enabled(not loading)
        self.confirm_button.set_enabled(not loading)
        if is_open:
            self.dialog.open()
        else:
            self.dialog.close()
