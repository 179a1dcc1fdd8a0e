#!/usr/bin/python

"""Command line interface for Tesla owner API functions."""

import argparse
import asyncio
import configparser
import json
import logging
import sys
from getpass import getpass
from pathlib import Path

from rich.console import Console

from pyteslaownerapi import commands
from pyteslaownerapi.client import TeslaClient
from pyteslaownerapi.exceptions import TeslaExceptionError

vehicle_commands = {
    "wake_up": "Wake the vehicle up",
    "valet_mode": "Switch valet mode on or off",
    "reset_valet_pin": "Clear the valet mode PIN",
    "open_charge_door": "Open the charge port door",
    "charge_limit_standard": "Set charge limit to standard",
    "charge_limit_max_range": "Set charge limit to max range",
    "charge_limit": "Set charge limit to a percentage",
    "charge_start": "Start charging",
    "charge_stop": "Stop charging",
    "flash_lights": "Flash lights",
    "honk_horn": "Honk the horn",
    "unlock": "Unlock doors",
    "lock": "Lock doors",
    "set_temps": "Set driver and passenger temperature",
    "climate_on": "Start climate control",
    "climate_off": "Stop climate control",
    "sun_roof": "Move the sun roof",
    "remote_start": "Enable keyless driving",
    "open_trunk": "Open front or rear trunk",
}

console = Console()
printc = console.print

logging.basicConfig()
logging.root.setLevel(logging.WARNING)

_LOGGER = logging.getLogger(__name__)


def build_command(args) -> commands.VehicleCommand:  # noqa: PLR0911
    """Map the parsed arguments to a vehicle command."""
    name = args.command
    if name == "valet_mode":
        return commands.ValetMode(commands.ValetCommandOptions(args.on, args.pin))
    if name == "charge_limit":
        return commands.ChargeLimitPercentage(args.percent)
    if name == "set_temps":
        return commands.SetTemperature(args.driver_temp, args.passenger_temp)
    if name == "sun_roof":
        return commands.SetSunRoof(commands.RoofState(args.state), args.percent)
    if name == "remote_start":
        return commands.StartVehicle(args.password)
    if name == "open_trunk":
        return commands.OpenTrunk(commands.OpenTrunkOptions(commands.Trunk(args.trunk)))
    simple = {
        "wake_up": commands.WakeUp,
        "reset_valet_pin": commands.ResetValetPin,
        "open_charge_door": commands.OpenChargeDoor,
        "charge_limit_standard": commands.ChargeLimitStandard,
        "charge_limit_max_range": commands.ChargeLimitMaxRange,
        "charge_start": commands.StartCharging,
        "charge_stop": commands.StopCharging,
        "flash_lights": commands.FlashLights,
        "honk_horn": commands.HonkHorn,
        "unlock": commands.UnlockDoors,
        "lock": commands.LockDoors,
        "climate_on": commands.StartAutoConditioning,
        "climate_off": commands.StopAutoConditioning,
    }
    return simple[name]()


async def status(client, vehicle, _args):
    """Get all status information of the vehicle."""
    details = await client.get_vehicle_status(vehicle)
    return details._asdict()


async def send(client, vehicle, args):
    """Send a command to the vehicle."""
    response = await client.send_command_to_vehicle(vehicle, build_command(args))
    return {"result": response.result, "reason": response.reason}


async def main(args):
    """Get arguments from parser and run command."""
    try:
        with Path(args.session_file).open() as json_file:
            token = json.load(json_file)
    except FileNotFoundError:
        token = {}
    except json.decoder.JSONDecodeError:
        token = {}

    if args.debug:
        logging.root.setLevel(logging.DEBUG)

    email = args.email or input("Please enter Tesla account email: ")
    password = args.password or getpass()

    client = TeslaClient(
        email,
        password,
        token=token,
        use_mock_server=args.mock,
        debugging_enabled=args.debug,
    )

    response = {}
    try:
        if args.command == "list":
            vehicles = await client.get_vehicles()
            response = {v.vehicle_id: dict(v) for v in vehicles}
        elif args.command == "token":
            response = dict(await client.token_manager.check_authentication())
        else:
            if args.vehicle_id is not None:
                vehicle_ids = [args.vehicle_id]
            else:
                vehicle_ids = [v.vehicle_id for v in await client.get_vehicles()]
            func = status if args.command == "status" else send
            for vehicle_id in vehicle_ids:
                response[vehicle_id] = await func(client, vehicle_id, args)
    except TeslaExceptionError as e:
        await client.close()
        sys.exit(str(e))
    else:
        printc(response)
    await client.close()
    if client.token is not None:
        with Path(args.session_file).open("w", encoding="utf-8") as json_file:
            json.dump(client.token, json_file, ensure_ascii=False, indent=2)


def add_arg_vehicle(parser):
    """Add vehicle id to the argument parser."""
    group = parser.add_mutually_exclusive_group(
        required=True,
    )
    group.add_argument("-v", "--vehicle", dest="vehicle_id", default=None)
    group.add_argument("-a", "--all", dest="all", action="store_true")


def add_command_args(vcmd, parser_command):
    """Add the parameters a vehicle command takes."""
    if vcmd == "valet_mode":
        parser_command.add_argument("--off", dest="on", action="store_false", help="Switch valet mode off")
        parser_command.add_argument("-n", "--pin", dest="pin", default=None)
    if vcmd == "charge_limit":
        parser_command.add_argument("--percent", dest="percent", type=int, required=True)
    if vcmd == "set_temps":
        parser_command.add_argument("--driver", dest="driver_temp", type=float, required=True)
        parser_command.add_argument("--passenger", dest="passenger_temp", type=float, required=True)
    if vcmd == "sun_roof":
        parser_command.add_argument("--state", dest="state", choices=[s.value for s in commands.RoofState], required=True)
        parser_command.add_argument("--percent", dest="percent", type=float, default=0)
    if vcmd == "remote_start":
        parser_command.add_argument("--password", dest="password", required=True)
    if vcmd == "open_trunk":
        parser_command.add_argument("--trunk", dest="trunk", choices=[t.value for t in commands.Trunk], default="rear")


def cli():
    """Get configuration parameters and command line arguments and run main loop."""
    config = configparser.ConfigParser()
    config["tesla"] = {
        "email": "",
        "password": "",
        "session_file": ".session",
    }
    config.read([".teslaowner.cfg", Path("~/.teslaowner.cfg").expanduser()])
    parser = argparse.ArgumentParser(description="Tesla owner API CLI")
    subparsers = parser.add_subparsers(help="command help", dest="command")

    parser.add_argument("-d", "--debug", dest="debug", action="store_true")
    parser.add_argument("-m", "--mock", dest="mock", action="store_true", help="Use the mock server")
    parser.add_argument(
        "-e",
        "--email",
        dest="email",
        default=config.get("tesla", "email"),
    )
    parser.add_argument(
        "-p",
        "--password",
        dest="password",
        default=config.get("tesla", "password"),
    )
    parser.add_argument(
        "-s",
        "--sessionfile",
        dest="session_file",
        default=config.get("tesla", "session_file"),
    )

    subparsers.add_parser("list")
    subparsers.add_parser("token")
    add_arg_vehicle(subparsers.add_parser("status", help="Get vehicle status"))

    for vcmd, vdesc in vehicle_commands.items():
        parser_command = subparsers.add_parser(vcmd, help=vdesc)
        add_arg_vehicle(parser_command)
        add_command_args(vcmd, parser_command)

    args = parser.parse_args()

    if args.command:
        asyncio.run(main(args))
    else:
        parser.print_help(sys.stderr)


if __name__ == "__main__":
    cli()
