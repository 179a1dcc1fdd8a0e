#  SPDX-License-Identifier: Apache-2.0
"""Client for the Tesla owner API."""

from __future__ import annotations

import asyncio
import logging

import httpx

from . import endpoints
from .auth import Credentials, TokenManager
from .commands import VehicleCommand, encode
from .connection import Connection
from .const import RESPONSE_KEY, TOKEN_LEEWAY
from .models import (
    AuthToken,
    ChargeState,
    ClimateState,
    CommandResponse,
    DriveState,
    GuiSettings,
    Vehicle,
    VehicleDetails,
    VehicleState,
)

_LOGGER = logging.getLogger(__name__)


def _vehicle_id(vehicle: Vehicle | str | int) -> str:
    if isinstance(vehicle, Vehicle):
        vehicle_id = vehicle.vehicle_id
        if vehicle_id is None:
            msg = f"{vehicle!r} has no id"
            raise ValueError(msg)
        return vehicle_id
    return str(vehicle)


class TeslaClient:
    """Client for the Tesla owner API.

    Every call that needs authentication first obtains a valid token from
    the token manager, authenticating again with the stored credentials when
    the token has expired.

    :param email: Tesla account email
    :param password: Tesla account password
    :param token: token dict from an earlier session
    :param use_mock_server: send requests to the mock server instead of the production API
    :param debugging_enabled: log outgoing requests and their bodies
    :param async_client: httpx.AsyncClient or None
    :param leeway: time in seconds to consider token as expired before it actually expires
    :param connection: Connection to use instead of creating one
    """

    def __init__(
        self,
        email: str | None = None,
        password: str | None = None,
        token: dict | None = None,
        use_mock_server: bool = False,
        debugging_enabled: bool = False,
        async_client: httpx.AsyncClient | None = None,
        leeway: int = TOKEN_LEEWAY,
        connection: Connection | None = None,
    ) -> None:
        """Initialise the client."""
        if connection is None:
            connection = Connection(async_client, use_mock_server=use_mock_server, debugging_enabled=debugging_enabled)
        self.connection = connection
        credentials = Credentials(email, password) if email is not None and password is not None else None
        self.token_manager = TokenManager(connection, credentials, token=token, leeway=leeway)

    async def __aenter__(self) -> TeslaClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def token(self) -> AuthToken | None:
        """Return the current token."""
        return self.token_manager.token

    @property
    def is_authenticated(self) -> bool:
        """Return true if a token is held."""
        return self.token_manager.is_authenticated

    async def authenticate(self, email: str, password: str) -> AuthToken:
        """Authenticate with the Tesla owner API.

        You only need to call this once. The token and your credentials are
        stored, and if the token expires the credentials are reused.
        """
        return await self.token_manager.authenticate(email, password)

    async def get_vehicles(self) -> list[Vehicle]:
        """Retrieve the vehicles of the account, including not yet delivered ones."""
        token = await self.token_manager.check_authentication()
        _LOGGER.debug("Retrieving vehicle list")
        return await self.connection.request_list(
            Vehicle,
            endpoints.vehicles(),
            key_path=RESPONSE_KEY,
            token=token.access_token,
        )

    async def get_vehicle(self, vehicle_id: str | int) -> Vehicle | None:
        """Retrieve a single vehicle of the account by its id."""
        vehicles = await self.get_vehicles()
        filtered = [v for v in vehicles if v.vehicle_id == str(vehicle_id)]
        if len(filtered) > 0:
            return filtered[0]
        return None

    async def get_vehicle_status(self, vehicle: Vehicle | str | int) -> VehicleDetails:
        """Retrieve all the status information of a vehicle.

        The six parts are requested concurrently. If any of them fails the
        whole call fails with that error.
        """
        token = await self.token_manager.check_authentication()
        vehicle_id = _vehicle_id(vehicle)
        access_token = token.access_token
        _LOGGER.debug("Getting status for vehicle %s", vehicle_id)

        def fetch(model, endpoint):
            return self.connection.request_object(model, endpoint, key_path=RESPONSE_KEY, token=access_token)

        results = await asyncio.gather(
            self.connection.request(endpoints.mobile_access(vehicle_id), key_path=RESPONSE_KEY, token=access_token),
            fetch(ChargeState, endpoints.charge_state(vehicle_id)),
            fetch(ClimateState, endpoints.climate_state(vehicle_id)),
            fetch(DriveState, endpoints.drive_state(vehicle_id)),
            fetch(GuiSettings, endpoints.gui_settings(vehicle_id)),
            fetch(VehicleState, endpoints.vehicle_state(vehicle_id)),
        )
        mobile_access, *states = results
        return VehicleDetails(bool(mobile_access), *states)

    async def send_command_to_vehicle(self, vehicle: Vehicle | str | int, command: VehicleCommand) -> CommandResponse:
        """Send a command to a vehicle and return the response of the vehicle."""
        path, body = encode(command)
        token = await self.token_manager.check_authentication()
        vehicle_id = _vehicle_id(vehicle)
        _LOGGER.debug("Sending %s to vehicle %s", type(command).__name__, vehicle_id)

        response = await self.connection.request_object(
            CommandResponse,
            endpoints.command(vehicle_id, path),
            body=body,
            key_path=RESPONSE_KEY,
            token=token.access_token,
        )
        _LOGGER.debug("Got result: %s (%s)", response.result, response.reason)
        return response

    async def close(self):
        """Close the connection."""
        await self.connection.close()
