"""Example code for using the pyteslaownerapi library."""

import asyncio
import contextlib
import logging
from sys import argv

from pyteslaownerapi.client import TeslaClient

logging.basicConfig()

# Invoke like this: python ./examples/example.py <your email> <your password>
# By default the root logger is set to WARNING and all loggers you define
# inherit that value. Here we set the root logger to NOTSET. This logging
# level is automatically inherited by all existing and new sub-loggers
# that do not set a less verbose level.

logging.root.setLevel(logging.DEBUG)

email = argv[1]
password = argv[2]


async def vehicles() -> None:
    """Get vehicles connected to account and print out vehicle id, name and battery level."""
    client = TeslaClient()
    await client.authenticate(email, password)

    vehicles = await client.get_vehicles()
    for vehicle in vehicles:
        details = await client.get_vehicle_status(vehicle)
        print(
            f"Id: {vehicle.vehicle_id}, Name: {vehicle.display_name}, Battery: {details.charge_state.battery_level}%",
        )

    await client.close()


if __name__ == "__main__":
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    with contextlib.suppress(KeyboardInterrupt):
        loop.run_until_complete(vehicles())
