"""Price quote model."""

from __future__ import annotations

from decimal import Decimal

from pydantic import AliasChoices, Field, field_validator

from vehicle_catalog.models._base import CatalogModel


class PriceQuote(CatalogModel):
    """Current price of a vehicle as reported by the pricing service.

    ``amount`` is a :class:`~decimal.Decimal`; the transport decodes JSON
    numbers with ``parse_float=Decimal`` so trailing zeros survive
    (``20000.00`` stays ``20000.00``).
    """

    currency: str = Field(min_length=1)
    """Currency code (e.g. ``"USD"``)."""
    amount: Decimal = Field(validation_alias=AliasChoices("amount", "price"))
    vehicle_id: int | None = Field(default=None, validation_alias=AliasChoices("vehicleId", "vehicle_id"))

    @field_validator("currency")
    @classmethod
    def _strip_currency(cls, value: str) -> str:
        return value.strip()

    @field_validator("amount")
    @classmethod
    def _finite_amount(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("amount must be finite")
        return value

    def display(self) -> str:
        """Return the catalog display string, e.g. ``"USD20000.00"``."""
        return f"{self.currency}{self.amount}"
