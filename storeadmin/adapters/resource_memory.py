from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Set, Tuple
from uuid import uuid4

from storeadmin.domain.entities import ResourceId, ResourceRecord, StoreId
from storeadmin.domain.ports import ResourcePort

from .api_errors import ApiClientError


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass
class ResourceMemoryAdapter(ResourcePort):
    """Offline substitute for ``ResourceRestAdapter`` with deterministic responses.

    Records listed in ``in_use`` mimic entries still referenced by products:
    deleting them fails with HTTP 409 like a foreign-key violation would.
    """

    collection: str = "colors"
    in_use: Set[ResourceId] = field(default_factory=set)

    def __post_init__(self) -> None:
        self._records: Dict[Tuple[StoreId, ResourceId], ResourceRecord] = {}

    def seed(self, store_id: StoreId, name: str, value: str) -> ResourceRecord:
        return self.create(store_id, {"name": name, "value": value})

    # ---------- ResourcePort ----------

    def list(self, store_id: StoreId) -> List[ResourceRecord]:
        rows = [rec for (store, _), rec in self._records.items() if store == store_id]
        return sorted(rows, key=lambda rec: rec.created_at or "", reverse=True)

    def get(self, store_id: StoreId, resource_id: ResourceId) -> Optional[ResourceRecord]:
        return self._records.get((store_id, resource_id))

    def create(self, store_id: StoreId, payload: Dict[str, Any]) -> ResourceRecord:
        name, value = self._require_fields(payload, f"create[{store_id}]")
        stamp = _now()
        record = ResourceRecord(
            id=uuid4().hex,
            name=name,
            value=value,
            store_id=store_id,
            created_at=stamp,
            updated_at=stamp,
        )
        self._records[(store_id, record.id)] = record
        return record

    def update(
        self, store_id: StoreId, resource_id: ResourceId, payload: Dict[str, Any]
    ) -> ResourceRecord:
        ctx = f"update[{store_id}/{resource_id}]"
        current = self._require_record(store_id, resource_id, ctx)
        name, value = self._require_fields(payload, ctx)
        record = ResourceRecord(
            id=current.id,
            name=name,
            value=value,
            store_id=store_id,
            created_at=current.created_at,
            updated_at=_now(),
        )
        self._records[(store_id, resource_id)] = record
        return record

    def delete(self, store_id: StoreId, resource_id: ResourceId) -> None:
        ctx = f"delete[{store_id}/{resource_id}]"
        self._require_record(store_id, resource_id, ctx)
        if resource_id in self.in_use:
            raise ApiClientError(
                f"{ctx}: {self.collection} entry is still referenced (HTTP 409)",
                status=409,
                payload={"detail": "Resource is still referenced by products."},
                context=ctx,
            )
        del self._records[(store_id, resource_id)]

    # ---------- helpers ----------

    def _require_record(self, store_id: StoreId, resource_id: ResourceId, ctx: str) -> ResourceRecord:
        record = self._records.get((store_id, resource_id))
        if record is None:
            raise ApiClientError(f"{ctx}: not found (HTTP 404)", status=404, context=ctx)
        return record

    @staticmethod
    def _require_fields(payload: Dict[str, Any], ctx: str) -> Tuple[str, str]:
        name = str((payload or {}).get("name") or "")
        value = str((payload or {}).get("value") or "")
        if not name or not value:
            raise ApiClientError(
                f"{ctx}: name and value are required (HTTP 400)",
                status=400,
                payload="Name and value are required",
                context=ctx,
            )
        return name, value
