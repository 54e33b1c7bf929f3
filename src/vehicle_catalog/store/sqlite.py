"""SQLite-backed record store."""

from __future__ import annotations

import contextlib
import logging
import sqlite3
import threading
from collections.abc import Callable, Iterator
from datetime import datetime
from typing import Any

from vehicle_catalog.exceptions import RecordStoreError
from vehicle_catalog.models.vehicle import Condition, Details, Location, VehicleRecord
from vehicle_catalog.store.base import utcnow

_logger = logging.getLogger(__name__)

# Price and the address block of a location are derived per read and have
# no columns here.
_SCHEMA = """
    CREATE TABLE IF NOT EXISTS vehicles (
        id          INTEGER PRIMARY KEY AUTOINCREMENT,
        details     TEXT NOT NULL,
        condition   TEXT NOT NULL,
        latitude    REAL NOT NULL,
        longitude   REAL NOT NULL,
        created_at  TEXT NOT NULL,
        modified_at TEXT NOT NULL
    );
"""
_COLUMNS = "id, details, condition, latitude, longitude, created_at, modified_at"


@contextlib.contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except (sqlite3.Error, ValueError) as exc:
        raise RecordStoreError(f"SQLite {operation} failed: {exc}", operation=operation) from exc


class SqliteRecordStore:
    """SQLite-backed vehicle record store with WAL mode.

    Safe to share between threads; every statement runs under one lock.
    """

    def __init__(self, db_path: str = ":memory:", *, clock: Callable[[], datetime] = utcnow) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        with _translate_errors("open"):
            self._conn = sqlite3.connect(db_path, check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            with self._lock:
                self._conn.execute("PRAGMA journal_mode=WAL")
                self._conn.execute("PRAGMA synchronous=NORMAL")
                self._conn.executescript(_SCHEMA)

    # ── Lifecycle ──────────────────────────────────────────────────

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def __enter__(self) -> SqliteRecordStore:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    # ── Row mapping ────────────────────────────────────────────────

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> VehicleRecord:
        return VehicleRecord(
            id=row["id"],
            details=Details.model_validate_json(row["details"]),
            condition=Condition(row["condition"]),
            location=Location(lat=row["latitude"], lon=row["longitude"]),
            created_at=datetime.fromisoformat(row["created_at"]),
            modified_at=datetime.fromisoformat(row["modified_at"]),
        )

    def _select_one(self, vehicle_id: int) -> sqlite3.Row | None:
        row: sqlite3.Row | None = self._conn.execute(
            f"SELECT {_COLUMNS} FROM vehicles WHERE id = ?",
            (vehicle_id,),
        ).fetchone()
        return row

    # ── Queries ────────────────────────────────────────────────────

    def find_all(self) -> list[VehicleRecord]:
        with self._lock, _translate_errors("find_all"):
            rows = self._conn.execute(f"SELECT {_COLUMNS} FROM vehicles ORDER BY id").fetchall()
            return [self._row_to_record(row) for row in rows]

    def find_by_id(self, vehicle_id: int) -> VehicleRecord | None:
        with self._lock, _translate_errors("find_by_id"):
            row = self._select_one(vehicle_id)
            return self._row_to_record(row) if row is not None else None

    # ── Writes ─────────────────────────────────────────────────────

    def save(self, record: VehicleRecord) -> VehicleRecord:
        now = self._clock().isoformat()
        details_json = record.details.model_dump_json()
        location = record.location
        with self._lock, _translate_errors("save"), self._conn:
            if record.id is None:
                cursor = self._conn.execute(
                    "INSERT INTO vehicles (details, condition, latitude, longitude, created_at, modified_at)"
                    " VALUES (?, ?, ?, ?, ?, ?)",
                    (details_json, record.condition.value, location.lat, location.lon, now, now),
                )
                vehicle_id = cursor.lastrowid
            else:
                cursor = self._conn.execute(
                    "UPDATE vehicles SET details = ?, condition = ?, latitude = ?, longitude = ?, modified_at = ?"
                    " WHERE id = ?",
                    (details_json, record.condition.value, location.lat, location.lon, now, record.id),
                )
                if cursor.rowcount == 0:
                    raise RecordStoreError(f"No stored vehicle with id {record.id}", operation="save")
                vehicle_id = record.id
            row = self._select_one(vehicle_id) if vehicle_id is not None else None
            if row is None:
                raise RecordStoreError("Saved vehicle could not be read back", operation="save")
            stored = self._row_to_record(row)
        _logger.debug("Stored vehicle %s", vehicle_id)
        return stored

    def delete(self, record: VehicleRecord) -> None:
        if record.id is None:
            return
        with self._lock, _translate_errors("delete"), self._conn:
            self._conn.execute("DELETE FROM vehicles WHERE id = ?", (record.id,))
        _logger.debug("Removed vehicle %s", record.id)

    def __len__(self) -> int:
        with self._lock, _translate_errors("count"):
            (count,) = self._conn.execute("SELECT COUNT(*) FROM vehicles").fetchone()
        return int(count)
