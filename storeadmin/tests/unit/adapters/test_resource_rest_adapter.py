from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Sequence

import pytest
from requests import exceptions as req_exc

from storeadmin.adapters.api_errors import ApiClientError, ApiServerError, ApiTimeoutError
from storeadmin.adapters.resource_rest import ResourceRestAdapter


class _ResponseStub:
    def __init__(self, payload: Any, status_code: int = 200, text: Optional[str] = None) -> None:
        self._payload = payload
        self.status_code = status_code
        self.text = text if text is not None else json.dumps(payload)

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class _SessionStub:
    def __init__(self, responses: Sequence[Any]) -> None:
        self._responses = list(responses)
        self.calls: List[Dict[str, Any]] = []

    def request(
        self,
        method: str,
        url: str,
        *,
        data: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        timeout: Optional[int] = None,
    ) -> _ResponseStub:
        self.calls.append(
            {"method": method, "url": url, "data": data, "headers": dict(headers or {}), "timeout": timeout}
        )
        if not self._responses:
            raise RuntimeError("No stub response configured")
        resp = self._responses.pop(0)
        if isinstance(resp, Exception):
            raise resp
        return resp


def _adapter(responses: Sequence[Any], **kwargs: Any) -> tuple[ResourceRestAdapter, _SessionStub]:
    adapter = ResourceRestAdapter("http://shop.local/api/", **kwargs)
    stub = _SessionStub(responses)
    adapter.session.session = stub  # type: ignore[assignment]
    return adapter, stub


def _color(**overrides: Any) -> Dict[str, Any]:
    payload = {"id": "c1", "storeId": "s1", "name": "Black", "value": "#000000"}
    payload.update(overrides)
    return payload


def test_create_posts_json_body_to_collection() -> None:
    adapter, stub = _adapter([_ResponseStub(_color())], api_key="secret")

    record = adapter.create("s1", {"name": "Black", "value": "#000000"})

    call = stub.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://shop.local/api/s1/colors"
    assert json.loads(call["data"]) == {"name": "Black", "value": "#000000"}
    assert call["headers"]["Content-Type"] == "application/json"
    assert call["headers"]["X-API-Key"] == "secret"
    assert call["timeout"] == 10
    assert record.id == "c1"


def test_update_patches_item_url() -> None:
    adapter, stub = _adapter([_ResponseStub(_color(name="Jet"))], collection="sizes")

    record = adapter.update("s1", "c1", {"name": "Jet", "value": "#000000"})

    assert stub.calls[0]["method"] == "PATCH"
    assert stub.calls[0]["url"] == "http://shop.local/api/s1/sizes/c1"
    assert record.name == "Jet"


def test_delete_sends_no_body() -> None:
    adapter, stub = _adapter([_ResponseStub(_color())])

    adapter.delete("s1", "c1")

    assert stub.calls[0]["method"] == "DELETE"
    assert stub.calls[0]["data"] is None
    assert "Content-Type" not in stub.calls[0]["headers"]
    assert "X-API-Key" not in stub.calls[0]["headers"]


def test_get_returns_none_for_missing_record() -> None:
    adapter, _ = _adapter([_ResponseStub(None, status_code=404, text="Not found"), _ResponseStub(None)])

    assert adapter.get("s1", "missing") is None
    assert adapter.get("s1", "also-missing") is None


def test_list_skips_non_object_entries() -> None:
    adapter, _ = _adapter([_ResponseStub([_color(), "junk", _color(id="c2", name="White")])])

    records = adapter.list("s1")

    assert [rec.id for rec in records] == ["c1", "c2"]


def test_client_error_carries_status_and_text_hint() -> None:
    adapter, _ = _adapter([_ResponseStub(ValueError("no json"), status_code=400, text="Name is required")])

    with pytest.raises(ApiClientError) as info:
        adapter.create("s1", {"name": "", "value": "x"})

    assert info.value.status == 400
    assert info.value.hint == "Name is required"
    assert "HTTP 400" in str(info.value)


def test_server_error_is_typed() -> None:
    adapter, _ = _adapter([_ResponseStub({"detail": "foreign key"}, status_code=500)])

    with pytest.raises(ApiServerError) as info:
        adapter.delete("s1", "c1")

    assert info.value.status == 500
    assert "foreign key" in str(info.value)


def test_timeout_is_not_retried_by_default() -> None:
    adapter, stub = _adapter([req_exc.Timeout("slow"), _ResponseStub(_color())])

    with pytest.raises(ApiTimeoutError):
        adapter.create("s1", {"name": "Black", "value": "#000000"})

    assert len(stub.calls) == 1


def test_get_timeout_retries_when_configured() -> None:
    adapter, stub = _adapter([req_exc.ConnectionError("down"), _ResponseStub(_color())], retries=1)

    record = adapter.get("s1", "c1")

    assert record is not None and record.id == "c1"
    assert [call["method"] for call in stub.calls] == ["GET", "GET"]


@pytest.mark.parametrize(
    "call",
    [
        lambda adapter: adapter.create("s1", {"name": "Black", "value": "#000000"}),
        lambda adapter: adapter.update("s1", "c1", {"name": "Black", "value": "#000000"}),
        lambda adapter: adapter.delete("s1", "c1"),
    ],
    ids=["create", "update", "delete"],
)
def test_writes_are_sent_once_even_with_retries(call) -> None:
    adapter, stub = _adapter([req_exc.ReadTimeout("slow"), _ResponseStub(_color())], retries=1)

    with pytest.raises(ApiTimeoutError):
        call(adapter)

    assert len(stub.calls) == 1


def test_item_url_requires_resource_id() -> None:
    adapter, stub = _adapter([])

    with pytest.raises(ValueError):
        adapter.delete("s1", "")
    assert stub.calls == []
