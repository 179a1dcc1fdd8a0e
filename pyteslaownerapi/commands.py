#  SPDX-License-Identifier: Apache-2.0
"""Remote commands that can be sent to a vehicle.

Every command is a small immutable value. :func:`encode` turns a command
into the path of the command endpoint and, for the two commands that take
structured options, the JSON body to send with it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union
from urllib.parse import quote

from .exceptions import TeslaInvalidOptionsForCommandError

_LOGGER = logging.getLogger(__name__)


class StrEnum(str, Enum):
    """A string enumeration of type `(str, Enum)`. All members are compared via `lower()`."""

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        msg = f"'{value}' is not a valid {cls.__name__}"
        raise ValueError(msg)


class RoofState(StrEnum):
    """Positions the sun roof can be moved to."""

    OPEN = "open"
    CLOSE = "close"
    COMFORT = "comfort"
    VENT = "vent"
    MOVE = "move"


class Trunk(StrEnum):
    """Trunks that can be opened remotely."""

    REAR = "rear"
    FRONT = "front"


class ValetCommandOptions(NamedTuple):
    """Options for switching valet mode on or off."""

    activated: bool
    pin: str | None = None

    def to_json(self) -> dict:
        """Return the JSON body for the valet mode command."""
        return {"on": self.activated, "password": self.pin}


class OpenTrunkOptions(NamedTuple):
    """Options for opening a trunk."""

    trunk: Trunk = Trunk.REAR

    def to_json(self) -> dict:
        """Return the JSON body for the trunk open command."""
        return {"which_trunk": Trunk(self.trunk).value}


@dataclass(frozen=True)
class WakeUp:
    """Wake the vehicle up from sleep.

    The API answers with the vehicle itself instead of a result and reason,
    so the decoded :class:`CommandResponse` reports ``result`` as False.
    Check its ``state`` key, ``"online"`` once the vehicle is awake.
    """


@dataclass(frozen=True)
class ValetMode:
    """Switch valet mode on or off."""

    options: ValetCommandOptions | None = None


@dataclass(frozen=True)
class ResetValetPin:
    """Clear the valet mode PIN."""


@dataclass(frozen=True)
class OpenChargeDoor:
    """Open the charge port door."""


@dataclass(frozen=True)
class ChargeLimitStandard:
    """Set the charge limit to the standard level."""


@dataclass(frozen=True)
class ChargeLimitMaxRange:
    """Set the charge limit to maximum range."""


@dataclass(frozen=True)
class ChargeLimitPercentage:
    """Set the charge limit to a percentage."""

    limit: int


@dataclass(frozen=True)
class StartCharging:
    """Start charging."""


@dataclass(frozen=True)
class StopCharging:
    """Stop charging."""


@dataclass(frozen=True)
class FlashLights:
    """Flash the headlights briefly."""


@dataclass(frozen=True)
class HonkHorn:
    """Honk the horn briefly."""


@dataclass(frozen=True)
class UnlockDoors:
    """Unlock the doors."""


@dataclass(frozen=True)
class LockDoors:
    """Lock the doors."""


@dataclass(frozen=True)
class SetTemperature:
    """Set the driver and passenger target temperatures in Celsius."""

    driver_temperature: float
    passenger_temperature: float


@dataclass(frozen=True)
class StartAutoConditioning:
    """Start climate control."""


@dataclass(frozen=True)
class StopAutoConditioning:
    """Stop climate control."""


@dataclass(frozen=True)
class SetSunRoof:
    """Move the sun roof."""

    state: RoofState
    percentage: float = 0


@dataclass(frozen=True)
class StartVehicle:
    """Enable keyless driving; requires the account password."""

    password: str


@dataclass(frozen=True)
class OpenTrunk:
    """Open the front or rear trunk."""

    options: OpenTrunkOptions | None = None


VehicleCommand = Union[
    WakeUp,
    ValetMode,
    ResetValetPin,
    OpenChargeDoor,
    ChargeLimitStandard,
    ChargeLimitMaxRange,
    ChargeLimitPercentage,
    StartCharging,
    StopCharging,
    FlashLights,
    HonkHorn,
    UnlockDoors,
    LockDoors,
    SetTemperature,
    StartAutoConditioning,
    StopAutoConditioning,
    SetSunRoof,
    StartVehicle,
    OpenTrunk,
]

# commands whose path carries no parameters
_SIMPLE_PATHS = {
    WakeUp: "wake_up",
    ValetMode: "command/set_valet_mode",
    ResetValetPin: "command/reset_valet_pin",
    OpenChargeDoor: "command/charge_port_door_open",
    ChargeLimitStandard: "command/charge_standard",
    ChargeLimitMaxRange: "command/charge_max_range",
    StartCharging: "command/charge_start",
    StopCharging: "command/charge_stop",
    FlashLights: "command/flash_lights",
    HonkHorn: "command/honk_horn",
    UnlockDoors: "command/door_unlock",
    LockDoors: "command/door_lock",
    StartAutoConditioning: "command/auto_conditioning_start",
    StopAutoConditioning: "command/auto_conditioning_stop",
    OpenTrunk: "command/trunk_open",
}


def _query_value(value: str) -> str:
    return quote(str(value), safe="")


def command_path(command: VehicleCommand) -> str:
    """Return the path of the command endpoint, relative to the vehicle.

    Numbers are written as plain decimal text, strings are percent-encoded.
    """
    if isinstance(command, ChargeLimitPercentage):
        if int(command.limit) != command.limit:
            msg = f"Charge limit must be a whole percentage, got {command.limit!r}"
            raise TeslaInvalidOptionsForCommandError(msg)
        return f"command/set_charge_limit?percent={int(command.limit)}"
    if isinstance(command, SetTemperature):
        return f"command/set_temps?driver_temp={float(command.driver_temperature)}&passenger_temp={float(command.passenger_temperature)}"
    if isinstance(command, SetSunRoof):
        return f"command/sun_roof_control?state={RoofState(command.state).value}&percent={float(command.percentage)}"
    if isinstance(command, StartVehicle):
        return f"command/remote_start_drive?password={_query_value(command.password)}"
    try:
        return _SIMPLE_PATHS[type(command)]
    except KeyError:
        msg = f"'{command!r}' is not a vehicle command"
        raise TypeError(msg) from None


def command_body(command: VehicleCommand) -> dict | None:
    """Return the JSON body for commands that take structured options."""
    if isinstance(command, (ValetMode, OpenTrunk)):
        if command.options is None:
            msg = f"{type(command).__name__} requires options"
            raise TeslaInvalidOptionsForCommandError(msg)
        return command.options.to_json()
    return None


def encode(command: VehicleCommand) -> tuple[str, dict | None]:
    """Encode a command into its path and optional JSON body."""
    path = command_path(command)
    body = command_body(command)
    _LOGGER.debug("Encoded command %s as %s", type(command).__name__, path.split("?")[0])
    return path, body
