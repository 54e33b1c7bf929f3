from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from itertools import count

import pytest

from vehicle_catalog.models.vehicle import Condition, Details, Location, Manufacturer, VehicleRecord


@pytest.fixture
def details() -> Details:
    return Details(
        body="sedan",
        model="Impala",
        manufacturer=Manufacturer(code=101, name="Chevrolet"),
        number_of_doors=4,
        fuel_type="Gasoline",
        engine="3.6L V6",
        mileage=32280,
        model_year=2018,
        production_year=2018,
        external_color="white",
    )


@pytest.fixture
def new_record(details: Details) -> VehicleRecord:
    """A not-yet-saved vehicle parked at 40.7, -74.0."""
    return VehicleRecord(
        details=details,
        condition=Condition.USED,
        location=Location(lat=40.7, lon=-74.0),
    )


@pytest.fixture
def ticking_clock() -> Callable[[], datetime]:
    """Clock that advances one minute per call."""
    start = datetime(2026, 1, 1, tzinfo=UTC)
    ticks = count()
    return lambda: start + timedelta(minutes=next(ticks))
