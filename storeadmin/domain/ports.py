from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

from .entities import ResourceId, ResourceRecord, StoreId


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str, *, meta: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.message = message
        self.meta = dict(meta or {})


# ---- Ports (Hexagonal boundaries) ----
class ResourcePort(Protocol):
    """CRUD operations against one collection of the store API."""

    def list(self, store_id: StoreId) -> List[ResourceRecord]: ...
    def get(self, store_id: StoreId, resource_id: ResourceId) -> Optional[ResourceRecord]: ...  # None on 404
    def create(self, store_id: StoreId, payload: Dict[str, Any]) -> ResourceRecord: ...
    def update(
        self, store_id: StoreId, resource_id: ResourceId, payload: Dict[str, Any]
    ) -> ResourceRecord: ...
    def delete(self, store_id: StoreId, resource_id: ResourceId) -> None: ...


class NavigatorPort(Protocol):
    """Page navigation owned by the hosting UI."""

    def refresh(self) -> None: ...  # invalidate cached page data
    def push(self, path: str) -> None: ...


class NotifierPort(Protocol):
    """Toast sink for user-facing outcome messages."""

    def success(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class StoragePort(Protocol):
    """Persistence for user settings."""

    def save_user_settings(self, payload: Dict[str, Any]) -> None: ...
    def load_user_settings(self) -> Optional[Dict[str, Any]]: ...
