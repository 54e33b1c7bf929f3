"""Clients for the services that enrich catalog reads."""

from vehicle_catalog.clients.maps import AddressLookup, MapsClient
from vehicle_catalog.clients.pricing import PriceLookup, PricingClient

__all__ = [
    "AddressLookup",
    "MapsClient",
    "PriceLookup",
    "PricingClient",
]
