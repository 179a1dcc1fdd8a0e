"""Tests for encoding vehicle commands."""

import pytest

from pyteslaownerapi import commands
from pyteslaownerapi.exceptions import TeslaInvalidOptionsForCommandError


class TestEncode:
    """Tests for encode."""

    def test_charge_limit_percentage_goes_in_query(self) -> None:
        """Test that the charge limit is encoded in the query string without body."""
        assert commands.encode(commands.ChargeLimitPercentage(50)) == ("command/set_charge_limit?percent=50", None)

    def test_charge_limit_must_be_whole(self) -> None:
        """Test that a fractional charge limit is rejected instead of truncated."""
        assert commands.command_path(commands.ChargeLimitPercentage(80.0)) == "command/set_charge_limit?percent=80"
        with pytest.raises(TeslaInvalidOptionsForCommandError):
            commands.encode(commands.ChargeLimitPercentage(50.7))

    def test_set_temperature_uses_decimal_text(self) -> None:
        """Test that temperatures are written as plain decimals."""
        path, body = commands.encode(commands.SetTemperature(21.0, 22.5))
        assert path == "command/set_temps?driver_temp=21.0&passenger_temp=22.5"
        assert body is None

    def test_valet_mode_sends_options_as_body(self) -> None:
        """Test that valet mode options become the JSON body."""
        options = commands.ValetCommandOptions(activated=True, pin="1234")
        path, body = commands.encode(commands.ValetMode(options))
        assert path == "command/set_valet_mode"
        assert body == {"on": True, "password": "1234"}

    def test_open_trunk_sends_options_as_body(self) -> None:
        """Test that trunk options become the JSON body."""
        path, body = commands.encode(commands.OpenTrunk(commands.OpenTrunkOptions(commands.Trunk.FRONT)))
        assert path == "command/trunk_open"
        assert body == {"which_trunk": "front"}

    def test_sun_roof(self) -> None:
        """Test that the roof state and percentage go in the query string."""
        path, _ = commands.encode(commands.SetSunRoof(commands.RoofState.VENT, 15))
        assert path == "command/sun_roof_control?state=vent&percent=15.0"

    def test_start_vehicle_password_is_percent_encoded(self) -> None:
        """Test that the password cannot break out of the query string."""
        path, _ = commands.encode(commands.StartVehicle("p&ss word=1"))
        assert path == "command/remote_start_drive?password=p%26ss%20word%3D1"

    def test_wake_up_has_no_command_prefix(self) -> None:
        """Test that wake up is posted next to, not under, the command paths."""
        assert commands.encode(commands.WakeUp()) == ("wake_up", None)

    @pytest.mark.parametrize(
        ("command", "path"),
        [
            (commands.ResetValetPin(), "command/reset_valet_pin"),
            (commands.OpenChargeDoor(), "command/charge_port_door_open"),
            (commands.ChargeLimitStandard(), "command/charge_standard"),
            (commands.ChargeLimitMaxRange(), "command/charge_max_range"),
            (commands.StartCharging(), "command/charge_start"),
            (commands.StopCharging(), "command/charge_stop"),
            (commands.FlashLights(), "command/flash_lights"),
            (commands.HonkHorn(), "command/honk_horn"),
            (commands.UnlockDoors(), "command/door_unlock"),
            (commands.LockDoors(), "command/door_lock"),
            (commands.StartAutoConditioning(), "command/auto_conditioning_start"),
            (commands.StopAutoConditioning(), "command/auto_conditioning_stop"),
        ],
    )
    def test_commands_without_parameters(self, command, path) -> None:
        """Test the paths of commands that carry no parameters."""
        assert commands.encode(command) == (path, None)

    @pytest.mark.parametrize("command", [commands.ValetMode(), commands.OpenTrunk()])
    def test_missing_options_raise(self, command) -> None:
        """Test that structured commands without options are rejected."""
        with pytest.raises(TeslaInvalidOptionsForCommandError):
            commands.encode(command)

    def test_unknown_command_raises(self) -> None:
        """Test that values that are not commands are rejected."""
        with pytest.raises(TypeError):
            commands.encode("honk")


class TestCommandValues:
    """Tests for the command value types."""

    def test_commands_are_immutable(self) -> None:
        """Test that a command cannot be changed after construction."""
        command = commands.ChargeLimitPercentage(80)
        with pytest.raises(AttributeError):
            command.limit = 90

    def test_commands_of_different_types_are_not_equal(self) -> None:
        """Test that parameterless commands compare by type."""
        assert commands.LockDoors() != commands.UnlockDoors()
        assert commands.LockDoors() == commands.LockDoors()

    def test_roof_state_is_case_insensitive(self) -> None:
        """Test that roof states can be looked up regardless of case."""
        assert commands.RoofState("VENT") is commands.RoofState.VENT
        with pytest.raises(ValueError, match="not a valid RoofState"):
            commands.RoofState("ajar")
