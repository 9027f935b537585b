from __future__ import annotations

from typing import Any, Dict, List, Optional

import requests

from storeadmin.domain.entities import ResourceId, ResourceRecord, StoreId
from storeadmin.domain.ports import ResourcePort

from .api_errors import (
    ApiClientError,
    ApiError,
    ApiServerError,
    build_error_message,
    extract_error_code,
    extract_error_hint,
    parse_error_payload,
)
from .http_client import HttpConfig, RetryingSession


class ResourceRestAdapter(ResourcePort):
    """REST adapter for one store collection (``/{store_id}/{collection}``)."""

    def __init__(
        self,
        base_url: str,
        *,
        collection: str = "colors",
        api_key: Optional[str] = None,
        request_timeout_s: int = 10,
        retries: int = 0,
    ) -> None:
        if not base_url or not base_url.strip():
            raise ValueError("ResourceRestAdapter requires an API base URL")
        if not collection or not collection.strip():
            raise ValueError("ResourceRestAdapter requires a collection name")

        self.base_url = base_url.strip().rstrip("/")
        self.collection = collection.strip().strip("/")
        self.cfg = HttpConfig(request_timeout_s=request_timeout_s, retries=retries)
        self.session = RetryingSession(api_key or None, self.cfg)

    def list(self, store_id: StoreId) -> List[ResourceRecord]:
        ctx = f"list[{store_id}/{self.collection}]"
        resp = self.session.get(self._collection_url(store_id))
        self._ensure_ok(resp, ctx)
        data = self._json_any(resp)
        if not isinstance(data, list):
            raise RuntimeError(f"{ctx}: expected list response")
        return [ResourceRecord.from_payload(entry) for entry in data if isinstance(entry, dict)]

    def get(self, store_id: StoreId, resource_id: ResourceId) -> Optional[ResourceRecord]:
        ctx = f"get[{store_id}/{self.collection}/{resource_id}]"
        resp = self.session.get(self._item_url(store_id, resource_id))
        if resp.status_code == 404:
            return None
        self._ensure_ok(resp, ctx)
        data = self._json_any(resp)
        # Prisma findUnique serializes a miss as a literal null body.
        if data is None:
            return None
        return self._record(data, ctx)

    def create(self, store_id: StoreId, payload: Dict[str, Any]) -> ResourceRecord:
        ctx = f"create[{store_id}/{self.collection}]"
        resp = self.session.post(self._collection_url(store_id), json_body=dict(payload))
        self._ensure_ok(resp, ctx)
        return self._record(self._json_any(resp), ctx)

    def update(
        self, store_id: StoreId, resource_id: ResourceId, payload: Dict[str, Any]
    ) -> ResourceRecord:
        ctx = f"update[{store_id}/{self.collection}/{resource_id}]"
        resp = self.session.patch(self._item_url(store_id, resource_id), json_body=dict(payload))
        self._ensure_ok(resp, ctx)
        return self._record(self._json_any(resp), ctx)

    def delete(self, store_id: StoreId, resource_id: ResourceId) -> None:
        ctx = f"delete[{store_id}/{self.collection}/{resource_id}]"
        resp = self.session.delete(self._item_url(store_id, resource_id))
        self._ensure_ok(resp, ctx)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _collection_url(self, store_id: StoreId) -> str:
        store = str(store_id or "").strip()
        if not store:
            raise ValueError("store_id must be a non-empty string")
        return f"{self.base_url}/{store}/{self.collection}"

    def _item_url(self, store_id: StoreId, resource_id: ResourceId) -> str:
        rid = str(resource_id or "").strip()
        if not rid:
            raise ValueError("resource_id must be a non-empty string")
        return f"{self._collection_url(store_id)}/{rid}"

    @staticmethod
    def _record(data: Any, ctx: str) -> ResourceRecord:
        if not isinstance(data, dict):
            raise RuntimeError(f"{ctx}: expected object response")
        try:
            return ResourceRecord.from_payload(data)
        except ValueError as exc:
            raise RuntimeError(f"{ctx}: {exc}") from exc

    @staticmethod
    def _ensure_ok(resp: requests.Response, ctx: str) -> None:
        if 200 <= resp.status_code < 300:
            return
        status = resp.status_code
        payload = parse_error_payload(resp)
        message = build_error_message(ctx, status, payload)
        if 400 <= status < 500:
            raise ApiClientError(
                message,
                status=status,
                code=extract_error_code(payload),
                hint=extract_error_hint(payload),
                payload=payload,
                context=ctx,
            )
        if 500 <= status < 600:
            raise ApiServerError(message, status=status, payload=payload, context=ctx)
        raise ApiError(message, status=status, payload=payload, context=ctx)

    @staticmethod
    def _json_any(resp: requests.Response) -> Any:
        try:
            return resp.json()
        except Exception:
            snippet = getattr(resp, "text", "")[:400]
            raise RuntimeError(f"Invalid JSON response: {snippet}")
