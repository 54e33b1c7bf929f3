"""Vehicle record model."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import AliasChoices, Field

from vehicle_catalog.models._base import CatalogModel

if TYPE_CHECKING:
    from vehicle_catalog.models.address import Address


class Condition(StrEnum):
    NEW = "NEW"
    USED = "USED"


class Manufacturer(CatalogModel):
    """Vehicle manufacturer."""

    code: int
    """Manufacturer code (e.g. ``101`` for Chevrolet)."""
    name: str
    """Manufacturer name."""


class Details(CatalogModel):
    """Descriptive attributes of a vehicle.

    The catalog stores and overlays these as a unit; no field is
    interpreted by the service.
    """

    body: str
    """Body style (e.g. ``"sedan"``)."""
    model: str
    """Model name (e.g. ``"Impala"``)."""
    manufacturer: Manufacturer
    number_of_doors: int | None = Field(default=None, ge=0)
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = Field(default=None, ge=0)
    """Odometer reading."""
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None


class Location(CatalogModel):
    """Where a vehicle is parked.

    ``lat``/``lon`` are the only stored facts. ``address``, ``city``,
    ``state`` and ``zip`` are filled in per read from the maps service and
    are never written to a record store.
    """

    DERIVED_FIELDS: ClassVar[frozenset[str]] = frozenset({"address", "city", "state", "zip"})

    lat: float = Field(ge=-90, le=90, validation_alias=AliasChoices("lat", "latitude"))
    lon: float = Field(ge=-180, le=180, validation_alias=AliasChoices("lon", "lng", "longitude"))
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None

    def coordinates(self) -> Location:
        """Return a copy carrying only ``lat``/``lon``."""
        return Location(lat=self.lat, lon=self.lon)

    def with_address(self, address: Address) -> Location:
        """Return a copy whose derived block is taken from *address*."""
        return self.model_copy(
            update={
                "address": address.line,
                "city": address.city,
                "state": address.state,
                "zip": address.zip,
            }
        )


class VehicleRecord(CatalogModel):
    """A vehicle in the catalog.

    A record with ``id=None`` has not been saved yet. ``created_at`` and
    ``modified_at`` are maintained by the record store; values supplied by
    callers are ignored on write.
    """

    PERSISTED_EXCLUDE: ClassVar[dict[str, Any]] = {
        "price": True,
        "location": set(Location.DERIVED_FIELDS),
    }
    """``model_dump`` exclude mapping that leaves only stored fields."""

    id: int | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None
    details: Details
    condition: Condition
    location: Location
    price: str | None = None
    """Display price (currency code followed by amount), filled in per read."""

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def without_derived(self) -> VehicleRecord:
        """Return a copy with the price and the derived location block cleared."""
        if self.price is None and self.location == self.location.coordinates():
            return self
        return self.model_copy(update={"price": None, "location": self.location.coordinates()})
