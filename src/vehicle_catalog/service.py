"""Vehicle catalog service.

Create, read, update and delete vehicle records, and attach the current
price and street address when a single vehicle is read.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

import aiohttp

from vehicle_catalog._transport import JsonTransport
from vehicle_catalog.clients.maps import AddressLookup, MapsClient
from vehicle_catalog.clients.pricing import PriceLookup, PricingClient
from vehicle_catalog.config import CatalogConfig
from vehicle_catalog.exceptions import CatalogError, EnrichmentUnavailableError, VehicleNotFoundError
from vehicle_catalog.models.address import Address
from vehicle_catalog.models.price import PriceQuote
from vehicle_catalog.models.vehicle import Location, VehicleRecord
from vehicle_catalog.store.base import RecordStore

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class VehicleService:
    """Async facade over the record store and the two lookup services.

    Usage::

        async with VehicleService(config, store) as service:
            vehicle = await service.find_by_id(1)

    Price and address lookups are best effort: if either service fails,
    times out or returns garbage, :meth:`find_by_id` still returns the
    record with that part left empty. Missing records and store failures
    are raised to the caller unchanged.
    """

    def __init__(
        self,
        config: CatalogConfig,
        store: RecordStore,
        *,
        session: aiohttp.ClientSession | None = None,
        price_lookup: PriceLookup | None = None,
        address_lookup: AddressLookup | None = None,
    ) -> None:
        self._config = config
        self._store = store
        self._external_session = session is not None
        self._http_session = session
        self._injected_price_lookup = price_lookup
        self._injected_address_lookup = address_lookup
        self._price_lookup: PriceLookup | None = None
        self._address_lookup: AddressLookup | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> VehicleService:
        self._price_lookup = self._injected_price_lookup
        self._address_lookup = self._injected_address_lookup
        if self._price_lookup is None or self._address_lookup is None:
            if self._http_session is None:
                self._http_session = aiohttp.ClientSession()
            transport = JsonTransport(self._http_session, timeout=self._config.lookup_timeout)
            if self._price_lookup is None:
                self._price_lookup = PricingClient(transport, self._config.pricing_url)
            if self._address_lookup is None:
                self._address_lookup = MapsClient(transport, self._config.maps_url)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._price_lookup = None
        self._address_lookup = None

    async def _run_store(self, call: Callable[..., T], *args: Any) -> T:
        """Run a blocking store call in the default executor."""
        return await asyncio.get_running_loop().run_in_executor(None, call, *args)

    def _require_lookups(self) -> tuple[PriceLookup, AddressLookup]:
        if self._price_lookup is None or self._address_lookup is None:
            raise CatalogError("Service not initialized. Use 'async with VehicleService(...) as service:'")
        return self._price_lookup, self._address_lookup

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    async def list_vehicles(self) -> list[VehicleRecord]:
        """Return every stored vehicle, without price or address."""
        return await self._run_store(self._store.find_all)

    async def find_by_id(self, vehicle_id: int) -> VehicleRecord:
        """Return one vehicle with its current price and street address.

        Raises :class:`VehicleNotFoundError` if no record has *vehicle_id*;
        in that case no lookup is issued. Both lookups run concurrently and
        each one's outcome is applied on its own.
        """
        record = await self._run_store(self._store.find_by_id, vehicle_id)
        if record is None:
            raise VehicleNotFoundError(vehicle_id)
        price_lookup, address_lookup = self._require_lookups()

        quote, address = await asyncio.gather(
            self._fetch_price(price_lookup, vehicle_id),
            self._fetch_address(address_lookup, vehicle_id, record.location),
        )

        update: dict[str, Any] = {}
        if quote is not None:
            update["price"] = quote.display()
        if address is not None:
            update["location"] = record.location.with_address(address)
        return record.model_copy(update=update) if update else record

    async def _fetch_price(self, lookup: PriceLookup, vehicle_id: int) -> PriceQuote | None:
        if not self._config.price_enabled:
            return None
        return await self._best_effort(f"Price lookup for vehicle {vehicle_id}", lookup.fetch_price(vehicle_id))

    async def _fetch_address(self, lookup: AddressLookup, vehicle_id: int, location: Location) -> Address | None:
        if not self._config.address_enabled:
            return None
        return await self._best_effort(
            f"Address lookup for vehicle {vehicle_id}",
            lookup.fetch_address(location.lat, location.lon),
        )

    async def _best_effort(self, what: str, call: Awaitable[T]) -> T | None:
        """Await *call* within the lookup timeout; any failure yields ``None``."""
        timeout = self._config.lookup_timeout
        try:
            return await asyncio.wait_for(call, timeout=timeout)
        except EnrichmentUnavailableError as exc:
            _logger.warning("%s unavailable: %s", what, exc)
        except TimeoutError:
            _logger.warning("%s timed out after %.2fs", what, timeout)
        except Exception:
            _logger.warning("%s failed", what, exc_info=True)
        return None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    async def save(self, record: VehicleRecord) -> VehicleRecord:
        """Create *record* if it has no id, otherwise update the stored one.

        An update copies only ``details``, the location's coordinates and
        ``condition`` onto the stored record. Every other stored field is
        kept whatever *record* carries.
        """
        if record.id is None:
            created = await self._run_store(self._store.save, record)
            _logger.info("Created vehicle %s", created.id)
            return created

        existing = await self._run_store(self._store.find_by_id, record.id)
        if existing is None:
            raise VehicleNotFoundError(record.id)

        merged = existing.model_copy(
            update={
                "details": record.details,
                "location": record.location.coordinates(),
                "condition": record.condition,
            }
        )
        return await self._run_store(self._store.save, merged)

    async def delete(self, vehicle_id: int) -> None:
        """Remove the vehicle with *vehicle_id*."""
        record = await self._run_store(self._store.find_by_id, vehicle_id)
        if record is None:
            raise VehicleNotFoundError(vehicle_id)
        await self._run_store(self._store.delete, record)
        _logger.info("Deleted vehicle %s", vehicle_id)
