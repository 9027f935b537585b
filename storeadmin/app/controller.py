"""Adapter and use-case wiring for the runtime.

This module owns lazy construction of the resource adapter and the use-case
objects that depend on values in
:class:`storeadmin.viewmodels.settings_vm.SettingsVM`. Pages call
``ensure_ready`` before building form controllers.
"""

from __future__ import annotations

from typing import Optional

from ..adapters.resource_rest import ResourceRestAdapter
from ..domain.ports import ResourcePort
from ..usecases.delete_resource import DeleteResource
from ..usecases.load_resource import ListResources, LoadResource
from ..usecases.save_resource import SaveResource
from ..viewmodels.settings_vm import SettingsVM


class AppController:
    """Create and cache the runtime adapter/use-cases from settings state."""

    def __init__(self, settings_vm: SettingsVM, *, resource_port: Optional[ResourcePort] = None) -> None:
        """Initialize controller with settings-backed lazy dependencies.

        Args:
            settings_vm: Settings holding the API URL, key, timeout and
                collection name used to build the REST adapter.
            resource_port: Fixed port to use instead of the REST adapter
                (demo mode and tests). It survives ``reset``.
        """
        self.settings_vm = settings_vm
        self._fixed_port = resource_port
        self._resource_port: Optional[ResourcePort] = None
        self.uc_save: Optional[SaveResource] = None
        self.uc_delete: Optional[DeleteResource] = None
        self.uc_load: Optional[LoadResource] = None
        self.uc_list: Optional[ListResources] = None

    @property
    def resource_port(self) -> Optional[ResourcePort]:
        return self._resource_port

    def reset(self) -> None:
        """Drop cached adapter and use-cases so the next ``ensure_ready`` rebuilds them."""
        self._resource_port = None
        self.uc_save = None
        self.uc_delete = None
        self.uc_load = None
        self.uc_list = None

    def ensure_ready(self) -> bool:
        """Ensure the adapter and use-cases exist.

        Returns:
            ``True`` when dependencies are available, ``False`` when settings
            are invalid (e.g. no API base URL).
        """
        if self._resource_port is not None:
            return True

        port = self._fixed_port
        if port is None:
            if not self.settings_vm.is_valid():
                return False
            port = ResourceRestAdapter(
                self.settings_vm.api_base_url,
                collection=self.settings_vm.collection,
                api_key=self.settings_vm.api_key or None,
                request_timeout_s=self.settings_vm.request_timeout_s,
                retries=self.settings_vm.retries,
            )

        self._resource_port = port
        self.uc_save = SaveResource(port)
        self.uc_delete = DeleteResource(port)
        self.uc_load = LoadResource(port)
        self.uc_list = ListResources(port)
        return True
