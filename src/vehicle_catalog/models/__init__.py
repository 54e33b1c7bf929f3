"""Data models for the vehicle catalog."""

from vehicle_catalog.models._base import CatalogModel
from vehicle_catalog.models.address import Address
from vehicle_catalog.models.price import PriceQuote
from vehicle_catalog.models.vehicle import Condition, Details, Location, Manufacturer, VehicleRecord

__all__ = [
    "Address",
    "CatalogModel",
    "Condition",
    "Details",
    "Location",
    "Manufacturer",
    "PriceQuote",
    "VehicleRecord",
]
