"""Maps (reverse geocoding) service client.

Endpoint:
  - GET /maps?lat={lat}&lon={lon}
"""

from __future__ import annotations

from typing import Any, Protocol

from pydantic import ValidationError

from vehicle_catalog._transport import Transport
from vehicle_catalog.exceptions import LookupPayloadError
from vehicle_catalog.models.address import Address


class AddressLookup(Protocol):
    """Anything that can turn a lat/lon pair into a street address."""

    async def fetch_address(self, lat: float, lon: float) -> Address:
        ...


def _parse_address(payload: Any, endpoint: str) -> Address:
    if not isinstance(payload, dict):
        raise LookupPayloadError(
            f"Expected a JSON object from {endpoint}, got {type(payload).__name__}",
            endpoint=endpoint,
        )
    try:
        return Address.model_validate(payload)
    except ValidationError as exc:
        raise LookupPayloadError(
            f"Malformed address payload from {endpoint}: {exc.error_count()} validation error(s)",
            endpoint=endpoint,
        ) from exc


class MapsClient:
    """Reverse-geocodes coordinates through the maps service."""

    def __init__(self, transport: Transport, base_url: str) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")

    async def fetch_address(self, lat: float, lon: float) -> Address:
        endpoint = f"{self._base_url}/maps"
        payload = await self._transport.get_json(endpoint, params={"lat": str(lat), "lon": str(lon)})
        return _parse_address(payload, endpoint)
