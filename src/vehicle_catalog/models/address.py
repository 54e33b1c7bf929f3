"""Reverse-geocoded address model."""

from __future__ import annotations

from pydantic import AliasChoices, ConfigDict, Field

from vehicle_catalog.models._base import CatalogModel


class Address(CatalogModel):
    """Street address returned by the maps service for a lat/lon pair.

    Every part is optional: the maps service may leave any of them out,
    and whatever it did return is still applied to the vehicle. Numeric
    values (a zip sent as ``2351``) are kept as strings.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    line: str | None = Field(default=None, validation_alias=AliasChoices("address", "line"))
    """Street line (``address`` on the wire)."""
    city: str | None = None
    state: str | None = None
    zip: str | None = None
