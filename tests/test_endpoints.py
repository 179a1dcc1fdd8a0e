"""Tests for resolving API endpoints."""

import pytest

from pyteslaownerapi import endpoints
from pyteslaownerapi.const import API_BASE_URL, MOCK_BASE_URL

ALL_ENDPOINTS = [
    endpoints.authentication(),
    endpoints.vehicles(),
    endpoints.mobile_access("1"),
    endpoints.charge_state("1"),
    endpoints.climate_state("1"),
    endpoints.drive_state("1"),
    endpoints.gui_settings("1"),
    endpoints.vehicle_state("1"),
    endpoints.command("1", "command/door_lock"),
]


class TestResolve:
    """Tests for resolve."""

    @pytest.mark.parametrize("endpoint", ALL_ENDPOINTS)
    def test_production_base_url_by_default(self, endpoint) -> None:
        """Test that the production server is used unless asked otherwise."""
        _, url = endpoints.resolve(endpoint)
        assert url == API_BASE_URL + endpoint.path

    @pytest.mark.parametrize("endpoint", ALL_ENDPOINTS)
    def test_mock_base_url_when_requested(self, endpoint) -> None:
        """Test that the mock server is used when use_mock_server is set."""
        _, url = endpoints.resolve(endpoint, use_mock_server=True)
        assert url == MOCK_BASE_URL + endpoint.path

    def test_methods(self) -> None:
        """Test the HTTP methods of the endpoints."""
        assert endpoints.resolve(endpoints.authentication())[0] == "POST"
        assert endpoints.resolve(endpoints.vehicles())[0] == "GET"
        assert endpoints.resolve(endpoints.charge_state("1"))[0] == "GET"
        assert endpoints.resolve(endpoints.command("1", "wake_up"))[0] == "POST"

    def test_route_drops_query(self) -> None:
        """Test that the route of a command endpoint has no query string."""
        endpoint = endpoints.command("7", "command/remote_start_drive?password=hunter2")
        assert endpoint.route == "/api/1/vehicles/7/command/remote_start_drive"
        assert endpoints.vehicles().route == "/api/1/vehicles"

    def test_paths(self) -> None:
        """Test the paths of the vehicle endpoints."""
        assert endpoints.authentication().path == "/oauth/token"
        assert endpoints.vehicles().path == "/api/1/vehicles"
        assert endpoints.mobile_access("7").path == "/api/1/vehicles/7/mobile_enabled"
        assert endpoints.gui_settings("7").path == "/api/1/vehicles/7/data_request/gui_settings"
        assert endpoints.command("7", "command/set_charge_limit?percent=50").path == (
            "/api/1/vehicles/7/command/set_charge_limit?percent=50"
        )
