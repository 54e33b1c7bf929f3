"""In-memory record store."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from datetime import datetime

from vehicle_catalog.exceptions import RecordStoreError
from vehicle_catalog.models.vehicle import VehicleRecord
from vehicle_catalog.store.base import utcnow

_logger = logging.getLogger(__name__)


class InMemoryRecordStore:
    """Process-local store for vehicle records.

    Records are kept in insertion order. Ids start at 1 and are never
    reused, even after a delete. Stored records are frozen models, so the
    instances handed out cannot alias mutable state.
    """

    def __init__(self, *, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._records: dict[int, VehicleRecord] = {}
        self._next_id = 1

    def find_all(self) -> list[VehicleRecord]:
        with self._lock:
            return list(self._records.values())

    def find_by_id(self, vehicle_id: int) -> VehicleRecord | None:
        with self._lock:
            return self._records.get(vehicle_id)

    def save(self, record: VehicleRecord) -> VehicleRecord:
        now = self._clock()
        stored = record.without_derived()
        with self._lock:
            if stored.id is None:
                stored = stored.model_copy(update={"id": self._next_id, "created_at": now, "modified_at": now})
                self._next_id += 1
            else:
                existing = self._records.get(stored.id)
                if existing is None:
                    raise RecordStoreError(f"No stored vehicle with id {stored.id}", operation="save")
                stored = stored.model_copy(update={"created_at": existing.created_at, "modified_at": now})
            assert stored.id is not None  # noqa: S101
            self._records[stored.id] = stored
        _logger.debug("Stored vehicle %s", stored.id)
        return stored

    def delete(self, record: VehicleRecord) -> None:
        if record.id is None:
            return
        with self._lock:
            self._records.pop(record.id, None)
        _logger.debug("Removed vehicle %s", record.id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
