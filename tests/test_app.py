import json

from prometheus_client import REGISTRY

from supply_store.app.main import build_environment
from supply_store.core.config import Settings, load_settings
from supply_store.state.seed import build_stores


def test_load_settings_defaults(monkeypatch):
    for var in ("SUPPLY_STORE_SEED_PATH", "SUPPLY_STORE_VALIDATE", "SUPPLY_STORE_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    settings = load_settings(dotenv=False)
    assert settings == Settings()


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("SUPPLY_STORE_SEED_PATH", "/tmp/seed.json")
    monkeypatch.setenv("SUPPLY_STORE_VALIDATE", "off")
    monkeypatch.setenv("SUPPLY_STORE_LOG_LEVEL", "debug")
    settings = load_settings(dotenv=False)
    assert settings.seed_path == "/tmp/seed.json"
    assert settings.validate_payloads is False
    assert settings.log_level == "DEBUG"


def test_build_environment_uses_seed_file(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"headquarters": [{"headquartersId": 5, "name": "North HQ"}]}))
    stores, router = build_environment(Settings(seed_path=str(path), validate_payloads=False))
    assert router.validate is False
    assert router.handle("GET", "/api/headquarters").body == [
        {
            "headquartersId": 5,
            "name": "North HQ",
            "description": "",
            "address": "",
            "contactPerson": "",
            "email": "",
            "phone": "",
        }
    ]
    assert len(stores.products) > 0


def _ops(entity, operation, outcome):
    return REGISTRY.get_sample_value(
        "supply_store_operations_total",
        {"entity": entity, "operation": operation, "outcome": outcome},
    ) or 0.0


def test_store_operations_are_counted():
    stores = build_stores()
    hits, misses = _ops("suppliers", "get", "ok"), _ops("suppliers", "get", "not_found")
    stores.suppliers.get(1)
    stores.suppliers.get(999)
    assert _ops("suppliers", "get", "ok") == hits + 1
    assert _ops("suppliers", "get", "not_found") == misses + 1


def test_record_gauge_tracks_size():
    stores = build_stores()
    stores.deliveries.remove(1)
    size = REGISTRY.get_sample_value("supply_store_records", {"entity": "deliveries"})
    assert size == len(stores.deliveries)
