"""Record store interface."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Protocol, runtime_checkable

from vehicle_catalog.models.vehicle import VehicleRecord


def utcnow() -> datetime:
    return datetime.now(UTC)


@runtime_checkable
class RecordStore(Protocol):
    """Durable storage of vehicle records keyed by id.

    Implementations own identity assignment and the ``created_at`` /
    ``modified_at`` timestamps, and never persist derived fields
    (``price`` and the location's address block). Each call is atomic for
    the single record it touches.

    Calls are blocking. :class:`~vehicle_catalog.service.VehicleService`
    runs them in the default executor, so implementations must be safe to
    call from worker threads.
    """

    def find_all(self) -> list[VehicleRecord]: ...

    def find_by_id(self, vehicle_id: int) -> VehicleRecord | None: ...

    def save(self, record: VehicleRecord) -> VehicleRecord: ...

    def delete(self, record: VehicleRecord) -> None: ...
