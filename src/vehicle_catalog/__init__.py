"""vehicle_catalog - Vehicle catalog with best-effort price and address enrichment."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("vehicle-catalog")
except PackageNotFoundError:
    __version__ = "0+local"
from vehicle_catalog.clients import AddressLookup, MapsClient, PriceLookup, PricingClient
from vehicle_catalog.config import CatalogConfig
from vehicle_catalog.exceptions import (
    CatalogConfigError,
    CatalogError,
    EnrichmentUnavailableError,
    LookupPayloadError,
    LookupTransportError,
    RecordStoreError,
    VehicleNotFoundError,
)
from vehicle_catalog.models import (
    Address,
    Condition,
    Details,
    Location,
    Manufacturer,
    PriceQuote,
    VehicleRecord,
)
from vehicle_catalog.service import VehicleService
from vehicle_catalog.store import InMemoryRecordStore, RecordStore, SqliteRecordStore

__all__ = [
    "__version__",
    "Address",
    "AddressLookup",
    "CatalogConfig",
    "CatalogConfigError",
    "CatalogError",
    "Condition",
    "Details",
    "EnrichmentUnavailableError",
    "InMemoryRecordStore",
    "Location",
    "LookupPayloadError",
    "LookupTransportError",
    "Manufacturer",
    "MapsClient",
    "PriceLookup",
    "PriceQuote",
    "PricingClient",
    "RecordStore",
    "RecordStoreError",
    "SqliteRecordStore",
    "VehicleNotFoundError",
    "VehicleRecord",
    "VehicleService",
]
