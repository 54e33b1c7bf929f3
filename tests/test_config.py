from __future__ import annotations

import pytest

from vehicle_catalog.config import CatalogConfig
from vehicle_catalog.exceptions import CatalogConfigError

_ENV_KEYS = (
    "VEHICLES_PRICING_URL",
    "VEHICLES_MAPS_URL",
    "VEHICLES_DATABASE_PATH",
    "VEHICLES_LOOKUP_TIMEOUT",
    "VEHICLES_PRICE_ENABLED",
    "VEHICLES_ADDRESS_ENABLED",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults() -> None:
    config = CatalogConfig.from_env()

    assert config.pricing_url == "http://localhost:8082"
    assert config.maps_url == "http://localhost:9191"
    assert config.lookup_timeout == 5.0
    assert config.database_path == ":memory:"
    assert config.price_enabled is True
    assert config.address_enabled is True


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_PRICING_URL", "http://pricing.internal:8080/")
    monkeypatch.setenv("VEHICLES_MAPS_URL", "http://maps.internal")
    monkeypatch.setenv("VEHICLES_DATABASE_PATH", "/var/lib/catalog.db")
    monkeypatch.setenv("VEHICLES_LOOKUP_TIMEOUT", "1.5")
    monkeypatch.setenv("VEHICLES_PRICE_ENABLED", "off")

    config = CatalogConfig.from_env()

    assert config.pricing_url == "http://pricing.internal:8080"
    assert config.maps_url == "http://maps.internal"
    assert config.database_path == "/var/lib/catalog.db"
    assert config.lookup_timeout == 1.5
    assert config.price_enabled is False
    assert config.address_enabled is True


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_LOOKUP_TIMEOUT", "9")
    monkeypatch.setenv("VEHICLES_ADDRESS_ENABLED", "0")

    config = CatalogConfig.from_env(lookup_timeout=0.5, address_enabled=True)

    assert config.lookup_timeout == 0.5
    assert config.address_enabled is True


def test_unparseable_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_PRICE_ENABLED", "maybe")

    assert CatalogConfig.from_env().price_enabled is True


def test_bad_timeout_in_env_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VEHICLES_LOOKUP_TIMEOUT", "soon")

    with pytest.raises(CatalogConfigError, match="VEHICLES_LOOKUP_TIMEOUT"):
        CatalogConfig.from_env()


@pytest.mark.parametrize("timeout", [0.0, -1.0])
def test_non_positive_timeout_rejected(timeout: float) -> None:
    with pytest.raises(CatalogConfigError):
        CatalogConfig(lookup_timeout=timeout)


def test_empty_url_rejected() -> None:
    with pytest.raises(CatalogConfigError, match="maps_url"):
        CatalogConfig(maps_url="")
