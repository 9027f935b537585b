from __future__ import annotations

from dataclasses import dataclass

from ..domain.entities import ResourceRoute
from ..domain.ports import ResourcePort, UseCaseError
from .error_mapping import map_api_error


@dataclass
class DeleteResource:
    resource_port: ResourcePort

    def __call__(self, route: ResourceRoute) -> None:
        if not route.targets_existing:
            raise UseCaseError("MISSING_ID", "Resource id is required for deletes.")
        try:
            self.resource_port.delete(route.store_id, str(route.resource_id))
        except Exception as exc:
            raise map_api_error(exc, default_code="DELETE_FAILED")
