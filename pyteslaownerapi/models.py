#  SPDX-License-Identifier: Apache-2.0
"""Models the data returned by the Tesla owner API.

The API answers with plain JSON objects, so every model is a thin wrapper
around the decoded dict with read-only properties for the fields in use.
The raw payload stays accessible through the dict interface.
"""

from __future__ import annotations

import time
from typing import NamedTuple

from .const import TOKEN_LEEWAY


class AuthToken(dict):
    """Access token issued by the authentication endpoint.

    The API returns ``created_at`` with the token; when it is missing the
    creation time is taken to be now.
    """

    def __init__(self, params: dict) -> None:
        """Initialise the token from the authentication response."""
        super().__init__(params)
        if self.get("created_at") is None:
            self["created_at"] = int(time.time())

    @property
    def access_token(self) -> str | None:
        """Return the access token."""
        return self.get("access_token")

    @property
    def token_type(self) -> str | None:
        """Return the token type, normally ``bearer``."""
        return self.get("token_type")

    @property
    def expires_in(self) -> int | None:
        """Return the lifetime of the token in seconds."""
        return self.get("expires_in")

    @property
    def created_at(self) -> int:
        """Return the creation time stamp of the token."""
        return int(self["created_at"])

    @property
    def expires_at(self) -> int | None:
        """Return the expiration time stamp of the token."""
        if self.expires_in is None:
            return None
        return self.created_at + int(self.expires_in)

    def is_valid(self, leeway: int = TOKEN_LEEWAY) -> bool:
        """Return true if the token can still be used."""
        if self.access_token is None or self.expires_at is None:
            return False
        # consider the token expired a little before it actually expires
        return time.time() < self.expires_at - leeway

    def __repr__(self) -> str:
        """Return a representation that does not leak the access token."""
        return f"AuthToken(token_type={self.token_type!r}, expires_at={self.expires_at!r})"


class Vehicle(dict):
    """Representation of a vehicle as returned by the vehicle list."""

    @property
    def vehicle_id(self) -> str | None:
        """Return the identifier used to address the vehicle in API calls."""
        vehicle_id = self.get("id_s") or self.get("id")
        return None if vehicle_id is None else str(vehicle_id)

    @property
    def display_name(self) -> str:
        """Return the name the owner gave the vehicle."""
        return self.get("display_name") or ""

    @property
    def vin(self) -> str:
        """Get the VIN (vehicle identification number) of the vehicle."""
        return self.get("vin", "not available")

    @property
    def state(self) -> str | None:
        """Return the connectivity state, e.g. ``online`` or ``asleep``."""
        return self.get("state")

    @property
    def online(self) -> bool:
        """Return true if the vehicle is on-line."""
        return self.state == "online"

    @property
    def option_codes(self) -> list[str]:
        """Return the list of factory option codes."""
        codes = self.get("option_codes") or ""
        return [code for code in codes.split(",") if code]

    @property
    def color(self) -> str | None:
        return self.get("color")

    @property
    def in_service(self) -> bool:
        return bool(self.get("in_service"))

    @property
    def remote_start_enabled(self) -> bool:
        return bool(self.get("remote_start_enabled"))

    @property
    def calendar_enabled(self) -> bool:
        return bool(self.get("calendar_enabled"))

    @property
    def notifications_enabled(self) -> bool:
        return bool(self.get("notifications_enabled"))

    @property
    def tokens(self) -> list[str]:
        return self.get("tokens") or []

    def __repr__(self) -> str:
        """Return a printable representation of the vehicle."""
        return f"Vehicle({self.vehicle_id!r}, display_name={self.display_name!r}, state={self.state!r})"


class ChargeState(dict):
    """Charging related state of a vehicle."""

    @property
    def charging_state(self) -> str | None:
        """Return the charging state, e.g. ``Charging`` or ``Disconnected``."""
        return self.get("charging_state")

    @property
    def battery_level(self) -> int | None:
        """Return the state of charge of the battery in percent."""
        return self.get("battery_level")

    @property
    def battery_range(self) -> float | None:
        return self.get("battery_range")

    @property
    def charge_limit_soc(self) -> int | None:
        """Return the configured charge limit in percent."""
        return self.get("charge_limit_soc")

    @property
    def charge_port_door_open(self) -> bool:
        return bool(self.get("charge_port_door_open"))

    @property
    def charger_power(self) -> int | None:
        return self.get("charger_power")

    @property
    def time_to_full_charge(self) -> float | None:
        return self.get("time_to_full_charge")

    @property
    def charging(self) -> bool:
        """Return true if the vehicle is currently charging."""
        return self.charging_state == "Charging"


class ClimateState(dict):
    """Climate control related state of a vehicle."""

    @property
    def inside_temp(self) -> float | None:
        return self.get("inside_temp")

    @property
    def outside_temp(self) -> float | None:
        return self.get("outside_temp")

    @property
    def driver_temp_setting(self) -> float | None:
        return self.get("driver_temp_setting")

    @property
    def passenger_temp_setting(self) -> float | None:
        return self.get("passenger_temp_setting")

    @property
    def is_auto_conditioning_on(self) -> bool:
        return bool(self.get("is_auto_conditioning_on"))

    @property
    def is_climate_on(self) -> bool:
        """Return true if climate control is running."""
        return bool(self.get("is_climate_on"))

    @property
    def fan_status(self) -> int | None:
        return self.get("fan_status")


class DriveState(dict):
    """Position and motion of a vehicle."""

    @property
    def shift_state(self) -> str | None:
        return self.get("shift_state")

    @property
    def speed(self) -> float | None:
        return self.get("speed")

    @property
    def heading(self) -> int | None:
        return self.get("heading")

    @property
    def location(self) -> tuple[float | None, float | None, int | None]:
        """Get the location of the vehicle as latitude, longitude and heading."""
        return (self.get("latitude"), self.get("longitude"), self.heading)

    @property
    def gps_as_of(self) -> int | None:
        """Return the time stamp of the latest location fix."""
        return self.get("gps_as_of")


class GuiSettings(dict):
    """Display units configured in the vehicle."""

    @property
    def distance_units(self) -> str | None:
        return self.get("gui_distance_units")

    @property
    def temperature_units(self) -> str | None:
        return self.get("gui_temperature_units")

    @property
    def charge_rate_units(self) -> str | None:
        return self.get("gui_charge_rate_units")

    @property
    def uses_24_hour_time(self) -> bool:
        return bool(self.get("gui_24_hour_time"))

    @property
    def range_display(self) -> str | None:
        return self.get("gui_range_display")


class VehicleState(dict):
    """Doors, locks and software state of a vehicle."""

    @property
    def locked(self) -> bool:
        """Return true if the vehicle is locked."""
        return bool(self.get("locked"))

    @property
    def odometer(self) -> float | None:
        return self.get("odometer")

    @property
    def car_version(self) -> str | None:
        """Return the installed software version."""
        return self.get("car_version")

    @property
    def valet_mode(self) -> bool:
        return bool(self.get("valet_mode"))

    @property
    def sun_roof_state(self) -> str | None:
        return self.get("sun_roof_state")

    @property
    def sun_roof_percent_open(self) -> int | None:
        return self.get("sun_roof_percent_open")

    @property
    def doors_and_trunks(self) -> dict[str, str]:
        """Return the open/closed status of all doors and trunks."""
        keys = {"df": "driver_front", "dr": "driver_rear", "pf": "passenger_front", "pr": "passenger_rear", "ft": "front_trunk", "rt": "rear_trunk"}
        return {name: "Open" if self.get(key) else "Closed" for key, name in keys.items() if key in self}

    @property
    def vehicle_closed(self) -> bool:
        """Return true if all doors and trunks are closed."""
        return all(status == "Closed" for status in self.doors_and_trunks.values())


class VehicleDetails(NamedTuple):
    """Aggregate of all the status information of a vehicle.

    Slots are in the order the sub-states are requested.
    """

    mobile_access: bool
    charge_state: ChargeState
    climate_state: ClimateState
    drive_state: DriveState
    gui_settings: GuiSettings
    vehicle_state: VehicleState


class CommandResponse(dict):
    """Result of a command sent to a vehicle."""

    @property
    def result(self) -> bool:
        """Return true if the vehicle accepted the command."""
        return bool(self.get("result"))

    @property
    def reason(self) -> str:
        """Return the explanation given by the vehicle, empty on success."""
        return self.get("reason") or ""

    def __repr__(self) -> str:
        return f"CommandResponse(result={self.result!r}, reason={self.reason!r})"
