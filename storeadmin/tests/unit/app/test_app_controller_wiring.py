from __future__ import annotations

from storeadmin.adapters.resource_memory import ResourceMemoryAdapter
from storeadmin.adapters.resource_rest import ResourceRestAdapter
from storeadmin.app.controller import AppController
from storeadmin.viewmodels.settings_vm import SettingsVM


def test_controller_ensure_ready_wires_rest_adapter() -> None:
    settings = SettingsVM()
    settings.api_base_url = "https://shop.example/api"
    settings.collection = "sizes"
    settings.api_key = "token"

    controller = AppController(settings)

    assert controller.ensure_ready() is True
    port = controller.resource_port
    assert isinstance(port, ResourceRestAdapter)
    assert port.base_url == "https://shop.example/api"
    assert port.collection == "sizes"
    assert port.session.api_key == "token"
    assert port.cfg.retries == 0
    assert controller.uc_save is not None
    assert controller.uc_delete is not None
    assert controller.uc_load is not None
    assert controller.uc_list is not None


def test_controller_reset_rebuilds_from_new_settings() -> None:
    settings = SettingsVM()
    controller = AppController(settings)
    controller.ensure_ready()
    first = controller.resource_port

    settings.api_base_url = "https://other.example/api"
    controller.reset()
    assert controller.resource_port is None
    controller.ensure_ready()

    assert controller.resource_port is not first
    assert controller.resource_port.base_url == "https://other.example/api"


def test_controller_keeps_fixed_port_across_reset() -> None:
    port = ResourceMemoryAdapter()
    controller = AppController(SettingsVM(), resource_port=port)

    controller.ensure_ready()
    controller.reset()
    controller.ensure_ready()

    assert controller.resource_port is port
