"""Record store layer.

The catalog's only durable state lives here. Stores persist identity,
details, condition and coordinates; everything derived per read stays out.
"""

from vehicle_catalog.store.base import RecordStore
from vehicle_catalog.store.memory import InMemoryRecordStore
from vehicle_catalog.store.sqlite import SqliteRecordStore

__all__ = [
    "InMemoryRecordStore",
    "RecordStore",
    "SqliteRecordStore",
]
