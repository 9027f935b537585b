from __future__ import annotations

import asyncio
import json
from typing import List

import pytest

from storeadmin.domain.ports import UseCaseError
from storeadmin.web_ui.runtime import DEMO_COLORS, DEMO_STORE_ID, WebRuntime


class _Navigator:
    def __init__(self, runtime: WebRuntime) -> None:
        self.runtime = runtime
        self.paths: List[str] = []

    def refresh(self) -> None:
        self.runtime.refresh()

    def push(self, path: str) -> None:
        self.paths.append(path)


class _Toasts:
    def __init__(self) -> None:
        self.messages: List[str] = []

    def success(self, message: str) -> None:
        self.messages.append(message)

    def error(self, message: str) -> None:
        self.messages.append(message)


def test_demo_runtime_lists_seeded_records(tmp_path) -> None:
    runtime = WebRuntime(demo=True, storage_root=str(tmp_path))

    records = runtime.list_records(runtime.route_for(DEMO_STORE_ID))

    assert sorted(rec.name for rec in records) == sorted(name for name, _ in DEMO_COLORS)


def test_runtime_loads_saved_settings(tmp_path) -> None:
    (tmp_path / "user_settings.json").write_text(
        json.dumps({"api_base_url": "https://shop.example/api", "collection": "sizes", "entity_label": "size"}),
        encoding="utf-8",
    )

    runtime = WebRuntime(storage_root=str(tmp_path))

    assert runtime.settings_vm.collection == "sizes"
    assert runtime.route_for("s1").list_path() == "/s1/sizes"


def test_runtime_ignores_broken_settings_file(tmp_path) -> None:
    (tmp_path / "user_settings.json").write_text("{not json", encoding="utf-8")

    runtime = WebRuntime(storage_root=str(tmp_path))

    assert runtime.settings_payload()["collection"] == "colors"


def test_runtime_save_settings_persists(tmp_path) -> None:
    runtime = WebRuntime(storage_root=str(tmp_path))
    runtime.apply_settings_payload({"request_timeout_s": 20})
    runtime.save_settings()

    persisted = json.loads((tmp_path / "user_settings.json").read_text(encoding="utf-8"))
    assert persisted["request_timeout_s"] == 20


def test_form_built_from_loaded_record_deletes_and_refreshes(tmp_path) -> None:
    runtime = WebRuntime(demo=True, storage_root=str(tmp_path))
    existing = runtime.list_records(runtime.route_for(DEMO_STORE_ID))[0]
    route = runtime.route_for(DEMO_STORE_ID, resource_id=existing.id)
    refreshes: List[int] = []
    runtime.add_refresh_listener(lambda: refreshes.append(1))
    navigator, toasts = _Navigator(runtime), _Toasts()

    record = runtime.load_record(route)
    controller = runtime.build_form(route, record, navigator=navigator, notifier=toasts)
    assert controller.vm.title == "Edit color"

    controller.request_delete()
    asyncio.run(controller.confirm_delete())

    assert navigator.paths == [f"/{DEMO_STORE_ID}/colors"]
    assert refreshes == [1]
    assert toasts.messages == ["Color successfully deleted!"]
    assert runtime.load_record(route) is None


def test_new_segment_opens_create_form(tmp_path) -> None:
    runtime = WebRuntime(demo=True, storage_root=str(tmp_path))
    route = runtime.route_for(DEMO_STORE_ID, resource_id="new")

    controller = runtime.build_form(
        route, runtime.load_record(route), navigator=_Navigator(runtime), notifier=_Toasts()
    )

    assert controller.vm.title == "Create color"
    assert controller.vm.delete_available is False


def test_refresh_listener_errors_do_not_stop_others(tmp_path) -> None:
    runtime = WebRuntime(storage_root=str(tmp_path))
    calls: List[str] = []

    def broken() -> None:
        raise RuntimeError("page closed")

    runtime.add_refresh_listener(broken)
    runtime.add_refresh_listener(lambda: calls.append("ok"))
    runtime.refresh()
    runtime.remove_refresh_listener(broken)

    assert calls == ["ok"]


def test_route_rejects_empty_store(tmp_path) -> None:
    runtime = WebRuntime(storage_root=str(tmp_path))

    with pytest.raises(ValueError):
        runtime.route_for("")


def test_other_collection_in_url_is_rejected(tmp_path) -> None:
    runtime = WebRuntime(demo=True, storage_root=str(tmp_path))
    route = runtime.route_for(DEMO_STORE_ID, "sizes")
    existing = runtime.list_records(runtime.route_for(DEMO_STORE_ID))[0]

    with pytest.raises(UseCaseError) as info:
        runtime.list_records(route)
    assert info.value.code == "UNKNOWN_COLLECTION"

    with pytest.raises(UseCaseError):
        runtime.load_record(route.with_resource(existing.id))
    with pytest.raises(UseCaseError):
        runtime.build_form(
            route.with_resource(existing.id), existing, navigator=_Navigator(runtime), notifier=_Toasts()
        )
    runtime.check_route(runtime.route_for(DEMO_STORE_ID, "colors"))
