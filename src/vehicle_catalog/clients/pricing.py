"""Pricing service client.

Endpoint:
  - GET /prices/{vehicle_id}
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import ValidationError

from vehicle_catalog._transport import Transport
from vehicle_catalog.exceptions import LookupPayloadError
from vehicle_catalog.models.price import PriceQuote

_logger = logging.getLogger(__name__)


class PriceLookup(Protocol):
    """Anything that can quote a price for a vehicle id."""

    async def fetch_price(self, vehicle_id: int) -> PriceQuote:
        ...


def _parse_price_quote(payload: Any, endpoint: str) -> PriceQuote:
    if not isinstance(payload, dict):
        raise LookupPayloadError(
            f"Expected a JSON object from {endpoint}, got {type(payload).__name__}",
            endpoint=endpoint,
        )
    try:
        return PriceQuote.model_validate(payload)
    except ValidationError as exc:
        raise LookupPayloadError(
            f"Malformed price payload from {endpoint}: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc


class PricingClient:
    """Reads the current price of a vehicle from the pricing service."""

    def __init__(self, transport: Transport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    async def fetch_price(self, vehicle_id: int) -> PriceQuote:
        endpoint = f"{self._base_url}/prices/{vehicle_id}"
        payload = await self._transport.get_json(endpoint)
        quote = _parse_price_quote(payload, endpoint)
        _logger.debug("Vehicle %s priced at %s", vehicle_id, quote.display())
        return quote
