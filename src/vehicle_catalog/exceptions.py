"""Custom exception hierarchy for vehicle_catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """Base exception for all vehicle_catalog errors."""


class CatalogConfigError(CatalogError):
    """Invalid or missing configuration."""


class VehicleNotFoundError(CatalogError):
    """No vehicle record exists for the requested id."""

    def __init__(self, vehicle_id: int) -> None:
        self.vehicle_id = vehicle_id
        super().__init__(f"Vehicle {vehicle_id} not found")


class RecordStoreError(CatalogError):
    """The record store itself failed (connectivity, constraint violation)."""

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)


class EnrichmentUnavailableError(CatalogError):
    """A price or address lookup could not produce a value.

    Raised by the lookup clients and absorbed by
    :meth:`vehicle_catalog.service.VehicleService.find_by_id`; callers of
    the service never see it.
    """

    def __init__(
        self,
        message: str,
        *,
        endpoint: str = "",
        status_code: int | None = None,
    ) -> None:
        self.endpoint = endpoint
        self.status_code = status_code
        super().__init__(message)


class LookupTransportError(EnrichmentUnavailableError):
    """HTTP-level failure (network, timeout, non-2xx, invalid JSON)."""


class LookupPayloadError(EnrichmentUnavailableError):
    """Response decoded as JSON but does not match the expected shape."""
