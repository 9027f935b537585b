"""NiceGUI entrypoint for the store admin resource pages."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import Any, Dict, Optional

from nicegui import ui

from storeadmin.domain.entities import NEW_RESOURCE_SEGMENT
from storeadmin.utils.logging import configure_root
from storeadmin.web_ui.alert_modal import AlertModal
from storeadmin.web_ui.runtime import DEMO_STORE_ID, WebRuntime

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the admin pages."""
    ui.add_head_html(
        """
<style>
:root {
  --sa-card: rgba(255, 255, 255, 0.92);
  --sa-border: #d4dbe6;
  --sa-muted: #5b6678;
}
.sa-page { max-width: 1100px; margin: 0 auto; padding: 16px; }
.sa-card { background: var(--sa-card); border: 1px solid var(--sa-border); border-radius: 10px; }
.sa-muted { color: var(--sa-muted); }
.sa-swatch { width: 22px; height: 22px; border-radius: 50%; border: 1px solid var(--sa-border); }
</style>
        """
    )


def _notify_error(exc: Exception) -> None:
    """Render exceptions as concise NiceGUI toasts."""
    ui.notify(str(exc), type="negative", close_button="OK")


class _PageNavigator:
    """NavigatorPort backed by ``ui.navigate`` and the runtime refresh signal."""

    def __init__(self, runtime: WebRuntime) -> None:
        self.runtime = runtime

    def refresh(self) -> None:
        self.runtime.refresh()

    def push(self, path: str) -> None:
        ui.navigate.to(path)


class _ToastNotifier:
    """NotifierPort backed by ``ui.notify``."""

    def success(self, message: str) -> None:
        ui.notify(message, type="positive")

    def error(self, message: str) -> None:
        ui.notify(message, type="negative", close_button="OK")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI pages for the runtime."""

    @ui.page("/")
    def index() -> None:
        store = {"id": DEMO_STORE_ID if runtime.demo_port else ""}

        def on_store_change(value: Any) -> None:
            store["id"] = str(value or "").strip()

        def open_collection() -> None:
            if not store["id"]:
                ui.notify("Enter a store id.")
                return
            ui.navigate.to(runtime.route_for(store["id"]).list_path())

        with ui.column().classes("sa-page"):
            ui.label("Store admin").classes("text-h5")
            ui.input("Store id", value=store["id"], on_change=lambda e: on_store_change(e.value)).props("outlined dense")
            ui.button(f"Open {runtime.settings_vm.collection}", on_click=open_collection)

    @ui.page("/{store_id}/{collection}")
    def list_page(store_id: str, collection: str) -> None:
        route = runtime.route_for(store_id, collection)
        try:
            runtime.check_route(route)
        except Exception as exc:
            LOGGER.warning("Rejected list page %s: %s", route.list_path(), exc)
            with ui.column().classes("sa-page"):
                ui.label(str(exc)).classes("text-negative")
                ui.link("Home", "/")
            return

        @ui.refreshable
        def render_rows() -> None:
            try:
                records = runtime.list_records(route)
            except Exception as exc:
                LOGGER.warning("Listing %s failed: %s", route.list_path(), exc)
                ui.label(str(exc)).classes("text-negative")
                return
            rows = [
                {"id": rec.id, "name": rec.name, "value": rec.value, "created": (rec.created_at or "")[:10]}
                for rec in records
            ]
            table = ui.table(
                columns=[
                    {"name": "name", "label": "Name", "field": "name", "align": "left"},
                    {"name": "value", "label": "Value", "field": "value", "align": "left"},
                    {"name": "created", "label": "Date", "field": "created", "align": "left"},
                ],
                rows=rows,
                row_key="id",
            ).classes("w-full")
            table.on("rowClick", lambda e: ui.navigate.to(route.with_resource(e.args[1]["id"]).form_path()))

        with ui.column().classes("sa-page w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                ui.label(f"{collection.capitalize()}").classes("text-h5")
                ui.button(
                    "Add new",
                    icon="add",
                    on_click=lambda: ui.navigate.to(route.with_resource(NEW_RESOURCE_SEGMENT).form_path()),
                )
            ui.separator()
            render_rows()

        runtime.add_refresh_listener(render_rows.refresh)
        ui.context.client.on_disconnect(lambda: runtime.remove_refresh_listener(render_rows.refresh))

    @ui.page("/{store_id}/{collection}/{resource_id}")
    async def form_page(store_id: str, collection: str, resource_id: str) -> None:
        route = runtime.route_for(store_id, collection, resource_id)
        try:
            record = await asyncio.to_thread(runtime.load_record, route)
            controller = runtime.build_form(
                route,
                record,
                navigator=_PageNavigator(runtime),
                notifier=_ToastNotifier(),
            )
        except Exception as exc:
            LOGGER.warning("Could not open %s: %s", route.form_path(), exc)
            _notify_error(exc)
            with ui.column().classes("sa-page"):
                ui.label(str(exc)).classes("text-negative")
                ui.link("Back to list", route.list_path())
            return

        vm = controller.vm
        inputs: Dict[str, Any] = {}
        errors: Dict[str, Any] = {}
        delete_button: Optional[Any] = None

        modal = AlertModal(on_close=controller.cancel_delete, on_confirm=controller.confirm_delete)

        with ui.column().classes("sa-page w-full"):
            with ui.row().classes("w-full items-center justify-between"):
                with ui.column().classes("gap-0"):
                    ui.label(vm.title).classes("text-h5")
                    ui.label(vm.description).classes("sa-muted text-body2")
                if vm.delete_available:
                    delete_button = ui.button(icon="delete", color="negative", on_click=controller.request_delete).props("dense")
            ui.separator()
            with ui.card().classes("sa-card w-full q-pa-md"):
                with ui.grid(columns=3).classes("w-full gap-8"):
                    for field_id, label in (("name", "Name"), ("value", "Value")):
                        with ui.column().classes("gap-1"):
                            inputs[field_id] = ui.input(
                                label,
                                value=getattr(vm.values, field_id),
                                placeholder=f"{vm.entity_label.capitalize()} {field_id}",
                                on_change=lambda e, f=field_id: vm.set_field(f, str(e.value or "")),
                            ).props("outlined dense")
                            errors[field_id] = ui.label("").classes("text-negative text-caption")
                submit_button = ui.button(vm.action_label, on_click=controller.submit, color="primary").classes("q-mt-md")

        def sync(_vm: Any = None) -> None:
            loading = vm.is_submitting
            for widget in inputs.values():
                widget.set_enabled(not loading)
            submit_button.set_enabled(vm.can_submit)
            if delete_button is not None:
                delete_button.set_enabled(vm.can_request_delete)
            for field_id, label in errors.items():
                message = vm.error_for(field_id) or ""
                label.set_text(message)
                label.set_visibility(bool(message))
            modal.render(is_open=vm.is_confirm_dialog_open, loading=loading)

        vm.on_state_changed = sync
        sync()
        ui.context.client.on_disconnect(controller.dispose)


def _parse_args() -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the store admin NiceGUI pages.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--api-base-url", default=None, help="Override the store API base URL.")
    parser.add_argument("--demo", action="store_true", help="Serve an in-memory collection.")
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args()


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    configure_root()
    runtime = WebRuntime(demo=args.demo)
    if args.api_base_url:
        runtime.apply_settings_payload({"api_base_url": args.api_base_url})
    if args.smoke_test:
        payload = runtime.settings_payload()
        print("web-smoke-ok", payload["api_base_url"], payload["collection"])
        return
    _install_theme()
    _build_ui(runtime)
    ui.run(
        host=args.host,
        port=args.port,
        title="Store Admin",
        reload=args.reload,
        show=False,
        storage_secret=os.environ.get("STOREADMIN_STORAGE_SECRET", "storeadmin-web-secret"),
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
