#!/usr/bin/env python3
"""Print catalog vehicles with their current price and address.

Opens the SQLite catalog named by ``VEHICLES_DATABASE_PATH`` and reads
one vehicle (or all of them) through :class:`VehicleService`, so the
pricing and maps services configured via ``VEHICLES_PRICING_URL`` and
``VEHICLES_MAPS_URL`` are queried exactly as a catalog read would.

Usage
-----
::

    export VEHICLES_DATABASE_PATH=catalog.db
    python scripts/show_vehicle.py --seed
    python scripts/show_vehicle.py --id 1

Options::

    --id N          Only show vehicle N (default: all vehicles)
    --seed          Insert a sample vehicle before reading
    --verbose, -v   Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from vehicle_catalog import (  # noqa: E402
    CatalogConfig,
    CatalogError,
    Condition,
    Details,
    Location,
    Manufacturer,
    SqliteRecordStore,
    VehicleRecord,
    VehicleService,
)

_SAMPLE = VehicleRecord(
    condition=Condition.USED,
    details=Details(
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
    ),
    location=Location(lat=40.730610, lon=-73.935242),
)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Show catalog vehicles with price and address")
    parser.add_argument("--id", type=int, dest="vehicle_id", help="Only show this vehicle (default: all vehicles)")
    parser.add_argument("--seed", action="store_true", help="Insert a sample vehicle before reading")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    config = CatalogConfig.from_env()
    with SqliteRecordStore(config.database_path) as store:
        async with VehicleService(config, store) as service:
            if args.seed:
                created = await service.save(_SAMPLE)
                print(f"Seeded vehicle {created.id}", file=sys.stderr)

            if args.vehicle_id is not None:
                ids = [args.vehicle_id]
            else:
                ids = [v.id for v in await service.list_vehicles() if v.id is not None]

            output = []
            for vehicle_id in ids:
                try:
                    vehicle = await service.find_by_id(vehicle_id)
                except CatalogError as exc:
                    print(f"ERROR: {exc}", file=sys.stderr)
                    return 1
                output.append(vehicle.model_dump(mode="json"))

    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
