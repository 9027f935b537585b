from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ..domain.entities import ResourceRecord, ResourceRoute
from ..domain.ports import ResourcePort
from .error_mapping import map_api_error


@dataclass
class LoadResource:
    """Fetch the record that seeds the form; ``None`` selects create mode."""

    resource_port: ResourcePort

    def __call__(self, route: ResourceRoute) -> Optional[ResourceRecord]:
        if not route.targets_existing:
            return None
        try:
            return self.resource_port.get(route.store_id, str(route.resource_id))
        except Exception as exc:
            raise map_api_error(exc, default_code="LOAD_FAILED")


@dataclass
class ListResources:
    """Rows for the collection list page."""

    resource_port: ResourcePort

    def __call__(self, route: ResourceRoute) -> List[ResourceRecord]:
        try:
            return list(self.resource_port.list(route.store_id))
        except Exception as exc:
            raise map_api_error(exc, default_code="LIST_FAILED")
