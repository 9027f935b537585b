from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import CreateMode, EditMode, FormMode, FormValues, ResourceRecord, ResourceRoute
from ..domain.ports import ResourcePort, UseCaseError
from .error_mapping import map_api_error


@dataclass
class SaveResource:
    """Insert or update one collection entry depending on the form mode."""

    resource_port: ResourcePort

    def __call__(self, route: ResourceRoute, mode: FormMode, values: FormValues) -> ResourceRecord:
        payload = values.to_payload()
        try:
            if isinstance(mode, EditMode):
                resource_id = route.resource_id if route.targets_existing else mode.record.id
                if not resource_id:
                    raise UseCaseError("MISSING_ID", "Resource id is required for updates.")
                return self.resource_port.update(route.store_id, resource_id, payload)
            if isinstance(mode, CreateMode):
                return self.resource_port.create(route.store_id, payload)
            raise UseCaseError("SAVE_FAILED", f"Unsupported form mode: {mode!r}")
        except Exception as exc:
            raise map_api_error(exc, default_code="SAVE_FAILED")
