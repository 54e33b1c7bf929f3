"""Catalog configuration for vehicle_catalog."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from vehicle_catalog.exceptions import CatalogConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise CatalogConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class CatalogConfig:
    """Catalog configuration.

    Parameters
    ----------
    pricing_url : str
        Base URL of the pricing service. Prices are read from
        ``{pricing_url}/prices/{vehicle_id}``.
    maps_url : str
        Base URL of the reverse-geocoding service. Addresses are read from
        ``{maps_url}/maps?lat=..&lon=..``.
    lookup_timeout : float
        Upper bound in seconds for each price or address lookup. A lookup
        that runs longer is treated as unavailable for that read.
    database_path : str
        SQLite database path used by :class:`vehicle_catalog.store.SqliteRecordStore`.
        ``":memory:"`` keeps the catalog in process memory.
    price_enabled : bool
        Issue price lookups on :meth:`VehicleService.find_by_id`.
    address_enabled : bool
        Issue address lookups on :meth:`VehicleService.find_by_id`.
    """

    pricing_url: str = "http://localhost:8082"
    maps_url: str = "http://localhost:9191"
    lookup_timeout: float = 5.0
    database_path: str = ":memory:"
    price_enabled: bool = True
    address_enabled: bool = True

    def __post_init__(self) -> None:
        if self.lookup_timeout <= 0:
            raise CatalogConfigError(f"lookup_timeout must be positive, got {self.lookup_timeout}")
        for name in ("pricing_url", "maps_url"):
            value = getattr(self, name)
            if not value:
                raise CatalogConfigError(f"{name} must be non-empty")
            object.__setattr__(self, name, value.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> CatalogConfig:
        """Create configuration from ``VEHICLES_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "VEHICLES_PRICING_URL": "pricing_url",
            "VEHICLES_MAPS_URL": "maps_url",
            "VEHICLES_DATABASE_PATH": "database_path",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("VEHICLES_LOOKUP_TIMEOUT")
        if timeout_env is not None and "lookup_timeout" not in overrides:
            config_kwargs["lookup_timeout"] = _env_float("VEHICLES_LOOKUP_TIMEOUT", timeout_env)

        if "price_enabled" not in overrides:
            config_kwargs["price_enabled"] = _env_bool(env.get("VEHICLES_PRICE_ENABLED"), True)
        if "address_enabled" not in overrides:
            config_kwargs["address_enabled"] = _env_bool(env.get("VEHICLES_ADDRESS_ENABLED"), True)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
