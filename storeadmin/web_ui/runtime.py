"""Runtime orchestration shared by the NiceGUI pages.

This module composes settings, adapters and use cases for the web pages. It
has no NiceGUI imports so it can be exercised without a browser session.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Callable, Dict, List, Mapping, Optional

from storeadmin.adapters.resource_memory import ResourceMemoryAdapter
from storeadmin.adapters.storage_local import StorageLocal
from storeadmin.app.controller import AppController
from storeadmin.app.resource_form_controller import ResourceFormController
from storeadmin.domain.entities import ResourceRecord, ResourceRoute
from storeadmin.domain.ports import NavigatorPort, NotifierPort, UseCaseError
from storeadmin.utils.logging import apply_gui_preferences
from storeadmin.viewmodels.resource_form_vm import ResourceFormVM
from storeadmin.viewmodels.settings_vm import SettingsVM

LOGGER = logging.getLogger(__name__)

DEMO_STORE_ID = "demo-store"
DEMO_COLORS = (("Black", "#000000"), ("White", "#FFFFFF"), ("Ocean", "#1D5D9B"))


class WebRuntime:
    """Orchestration state used by NiceGUI views."""

    def __init__(self, *, demo: bool = False, storage_root: Optional[str] = None) -> None:
        self.settings_vm = SettingsVM()
        self.storage = StorageLocal(
            root_dir=storage_root or os.environ.get("STOREADMIN_STORAGE_ROOT") or "."
        )
        self._refresh_listeners: List[Callable[[], None]] = []

        self.demo_port: Optional[ResourceMemoryAdapter] = None
        if demo:
            self.demo_port = ResourceMemoryAdapter()
            for name, value in DEMO_COLORS:
                self.demo_port.seed(DEMO_STORE_ID, name, value)
        self.controller = AppController(self.settings_vm, resource_port=self.demo_port)

        self._load_settings_defaults()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def settings_payload(self) -> Dict[str, Any]:
        return self.settings_vm.to_dict()

    def apply_settings_payload(self, payload: Mapping[str, Any]) -> None:
        self.settings_vm.apply_dict(payload)
        self.controller.reset()
        apply_gui_preferences(self.settings_vm.debug_logging)

    def save_settings(self) -> None:
        self.storage.save_user_settings(self.settings_vm.to_dict())

    # ------------------------------------------------------------------
    # Page data
    # ------------------------------------------------------------------
    def route_for(
        self, store_id: str, collection: Optional[str] = None, resource_id: Optional[str] = None
    ) -> ResourceRoute:
        return ResourceRoute(
            store_id=store_id,
            collection=collection or self.settings_vm.collection,
            resource_id=resource_id,
        )

    def check_route(self, route: ResourceRoute) -> None:
        """Reject routes for a collection other than the configured one."""
        configured = self.settings_vm.collection
        if route.collection != configured:
            raise UseCaseError(
                "UNKNOWN_COLLECTION",
                f"Collection '{route.collection}' is not served here (configured: '{configured}').",
                meta={"collection": route.collection},
            )

    def load_record(self, route: ResourceRoute) -> Optional[ResourceRecord]:
        self._require_ready()
        self.check_route(route)
        return self.controller.uc_load(route)

    def list_records(self, route: ResourceRoute) -> List[ResourceRecord]:
        self._require_ready()
        self.check_route(route)
        return self.controller.uc_list(route)

    def build_form(
        self,
        route: ResourceRoute,
        record: Optional[ResourceRecord],
        *,
        navigator: NavigatorPort,
        notifier: NotifierPort,
    ) -> ResourceFormController:
        """Create the VM and controller for one rendered form page."""
        self._require_ready()
        self.check_route(route)
        vm = ResourceFormVM(record, entity_label=self.settings_vm.entity_label)
        return ResourceFormController(
            vm=vm,
            route=route,
            save_uc=self.controller.uc_save,
            delete_uc=self.controller.uc_delete,
            navigator=navigator,
            notifier=notifier,
        )

    # ------------------------------------------------------------------
    # Refresh signal
    # ------------------------------------------------------------------
    def add_refresh_listener(self, callback: Callable[[], None]) -> None:
        self._refresh_listeners.append(callback)

    def remove_refresh_listener(self, callback: Callable[[], None]) -> None:
        if callback in self._refresh_listeners:
            self._refresh_listeners.remove(callback)

    def refresh(self) -> None:
        """Tell open list pages that collection data changed."""
        for callback in list(self._refresh_listeners):
            try:
                callback()
            except Exception:
                # a listener of a closed page must not break the others
                LOGGER.exception("Refresh listener failed")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _require_ready(self) -> None:
        if not self.controller.ensure_ready():
            raise UseCaseError("MISSING_URL", "Configure the store API base URL first.")

    def _load_settings_defaults(self) -> None:
        try:
            payload = self.storage.load_user_settings()
        except Exception as exc:
            LOGGER.warning("Could not load local settings defaults: %s", exc)
            return
        if not payload:
            return
        try:
            self.apply_settings_payload(payload)
        except Exception as exc:
            LOGGER.warning("Could not apply local settings defaults: %s", exc)
