from __future__ import annotations

import pytest

from storeadmin.adapters.api_errors import ApiClientError
from storeadmin.adapters.resource_memory import ResourceMemoryAdapter


def test_create_update_delete_cycle() -> None:
    port = ResourceMemoryAdapter()
    record = port.create("s1", {"name": "Black", "value": "#000000"})

    updated = port.update("s1", record.id, {"name": "Jet", "value": "#111111"})
    assert updated.name == "Jet"
    assert updated.created_at == record.created_at
    assert port.get("s1", record.id) == updated

    port.delete("s1", record.id)
    assert port.get("s1", record.id) is None
    assert port.list("s1") == []


def test_delete_of_referenced_record_conflicts() -> None:
    port = ResourceMemoryAdapter()
    record = port.seed("s1", "Black", "#000000")
    port.in_use.add(record.id)

    with pytest.raises(ApiClientError) as info:
        port.delete("s1", record.id)

    assert info.value.status == 409
    assert port.get("s1", record.id) == record


def test_records_are_scoped_per_store() -> None:
    port = ResourceMemoryAdapter()
    port.seed("s1", "Black", "#000000")

    assert port.list("s2") == []
    with pytest.raises(ApiClientError) as info:
        port.update("s2", "unknown", {"name": "a", "value": "b"})
    assert info.value.status == 404
