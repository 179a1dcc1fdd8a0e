#  SPDX-License-Identifier: Apache-2.0
"""Endpoints of the Tesla owner API."""

from __future__ import annotations

from typing import NamedTuple

from .const import API_BASE_URL, MOCK_BASE_URL


class Endpoint(NamedTuple):
    """HTTP method and path of an API operation."""

    method: str
    path: str

    @property
    def route(self) -> str:
        """Return the path without its query string, safe to put in messages."""
        return self.path.split("?")[0]

    def base_url(self, use_mock_server: bool = False) -> str:
        """Return the base URL of the server to send the request to."""
        return MOCK_BASE_URL if use_mock_server else API_BASE_URL

    def url(self, use_mock_server: bool = False) -> str:
        """Return the full URL of the endpoint."""
        return f"{self.base_url(use_mock_server)}{self.path}"


def authentication() -> Endpoint:
    return Endpoint("POST", "/oauth/token")


def vehicles() -> Endpoint:
    return Endpoint("GET", "/api/1/vehicles")


def mobile_access(vehicle_id: str) -> Endpoint:
    return Endpoint("GET", f"/api/1/vehicles/{vehicle_id}/mobile_enabled")


def _data_request(vehicle_id: str, name: str) -> Endpoint:
    return Endpoint("GET", f"/api/1/vehicles/{vehicle_id}/data_request/{name}")


def charge_state(vehicle_id: str) -> Endpoint:
    return _data_request(vehicle_id, "charge_state")


def climate_state(vehicle_id: str) -> Endpoint:
    return _data_request(vehicle_id, "climate_state")


def drive_state(vehicle_id: str) -> Endpoint:
    return _data_request(vehicle_id, "drive_state")


def gui_settings(vehicle_id: str) -> Endpoint:
    return _data_request(vehicle_id, "gui_settings")


def vehicle_state(vehicle_id: str) -> Endpoint:
    return _data_request(vehicle_id, "vehicle_state")


def command(vehicle_id: str, command_path: str) -> Endpoint:
    """Return the endpoint an encoded command is posted to."""
    return Endpoint("POST", f"/api/1/vehicles/{vehicle_id}/{command_path}")


def resolve(endpoint: Endpoint, use_mock_server: bool = False) -> tuple[str, str]:
    """Return the HTTP method and full URL for an endpoint."""
    return endpoint.method, endpoint.url(use_mock_server)
