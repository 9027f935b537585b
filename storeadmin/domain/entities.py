from __future__ import annotations

"""Domain value objects shared across adapters, use-cases, and view models."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

StoreId = str
ResourceId = str

NEW_RESOURCE_SEGMENT = "new"


@dataclass(frozen=True)
class ResourceRecord:
    """Existing collection entry as returned by the store API."""

    id: ResourceId
    """Backend identifier, preserved verbatim for PATCH/DELETE paths."""

    name: str
    """Display name shown in the admin list."""

    value: str
    """Stored value, e.g. a hex color code."""

    store_id: StoreId = ""
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError("ResourceRecord.id must be a non-empty string.")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ResourceRecord":
        """Build a record from an API object, accepting camelCase keys."""
        if not isinstance(payload, Mapping):
            raise ValueError("Resource payload must be an object.")
        raw_id = payload.get("id")
        if raw_id is None:
            raise ValueError("Resource payload is missing 'id'.")
        store_id = payload.get("storeId", payload.get("store_id"))
        created = payload.get("createdAt", payload.get("created_at"))
        updated = payload.get("updatedAt", payload.get("updated_at"))
        return cls(
            id=str(raw_id),
            name=str(payload.get("name") or ""),
            value=str(payload.get("value") or ""),
            store_id=str(store_id or ""),
            created_at=None if created is None else str(created),
            updated_at=None if updated is None else str(updated),
        )


@dataclass
class FormValues:
    """Editable form state; mutated by keystrokes, consumed on submit."""

    name: str = ""
    value: str = ""

    @classmethod
    def from_record(cls, record: Optional[ResourceRecord]) -> "FormValues":
        if record is None:
            return cls()
        return cls(name=record.name, value=record.value)

    def to_payload(self) -> Dict[str, str]:
        """Serialize into the JSON body sent on POST/PATCH."""
        return {"name": self.name, "value": self.value}


@dataclass(frozen=True)
class CreateMode:
    """Form opened without an existing record; submit inserts."""


@dataclass(frozen=True)
class EditMode:
    """Form opened for an existing record; submit updates, delete is allowed."""

    record: ResourceRecord


FormMode = Union[CreateMode, EditMode]


def mode_for(record: Optional[ResourceRecord]) -> FormMode:
    """Derive the form mode once from record presence."""
    if record is None:
        return CreateMode()
    return EditMode(record)


@dataclass(frozen=True)
class ResourceRoute:
    """Navigation context for one form page.

    ``resource_id`` is ``None`` (or the ``new`` path segment) for the create
    page. Paths returned here are relative; adapters prefix the API base URL.
    """

    store_id: StoreId
    collection: str = "colors"
    resource_id: Optional[ResourceId] = None

    def __post_init__(self) -> None:
        if not isinstance(self.store_id, str) or not self.store_id.strip():
            raise ValueError("ResourceRoute.store_id must be a non-empty string.")
        if not isinstance(self.collection, str) or not self.collection.strip():
            raise ValueError("ResourceRoute.collection must be a non-empty string.")

    @property
    def targets_existing(self) -> bool:
        rid = (self.resource_id or "").strip()
        return bool(rid) and rid != NEW_RESOURCE_SEGMENT

    def list_path(self) -> str:
        """Dashboard path of the collection list view."""
        return f"/{self.store_id}/{self.collection}"

    def form_path(self) -> str:
        rid = self.resource_id if self.targets_existing else NEW_RESOURCE_SEGMENT
        return f"/{self.store_id}/{self.collection}/{rid}"

    def with_resource(self, resource_id: Optional[ResourceId]) -> "ResourceRoute":
        return ResourceRoute(self.store_id, self.collection, resource_id)


__all__ = [
    "CreateMode",
    "EditMode",
    "FormMode",
    "FormValues",
    "NEW_RESOURCE_SEGMENT",
    "ResourceId",
    "ResourceRecord",
    "ResourceRoute",
    "StoreId",
    "mode_for",
]
