"""Pytest configuration and fixtures for Tesla owner API tests."""

import time

import pytest
import pytest_asyncio

from pyteslaownerapi.connection import Connection
from pyteslaownerapi.const import API_BASE_URL

VEHICLE_ID = "12345678901234567"


def vehicle_url(path: str) -> str:
    """Return the production URL of a vehicle endpoint."""
    return f"{API_BASE_URL}/api/1/vehicles/{VEHICLE_ID}/{path}"


def create_token(expires_in: int = 3600, age: int = 0, access_token: str = "abc123") -> dict:
    """Create a token dict as returned by the authentication endpoint.

    Args:
        expires_in: Lifetime of the token in seconds.
        age: Seconds since the token was created.
        access_token: Value of the access token.

    Returns:
        A dictionary representing an authentication response.

    """
    return {
        "access_token": access_token,
        "token_type": "bearer",
        "expires_in": expires_in,
        "created_at": int(time.time()) - age,
    }


@pytest.fixture
def valid_token() -> dict:
    """Fixture providing a token valid for another hour."""
    return create_token()


@pytest.fixture
def expired_token() -> dict:
    """Fixture providing a token that expired an hour ago."""
    return create_token(age=7200, access_token="expired")


@pytest.fixture
def sample_authenticate_response() -> dict:
    """Fixture providing a fresh authentication response."""
    return create_token(expires_in=3888000, access_token="fresh")


@pytest.fixture
def sample_vehicle() -> dict:
    """Fixture providing a single vehicle from the vehicle list."""
    return {
        "color": None,
        "display_name": "Nikola",
        "id": int(VEHICLE_ID),
        "id_s": VEHICLE_ID,
        "option_codes": "MS01,RENA,TM00,DRLH",
        "vehicle_id": 1514029006,
        "vin": "5YJSA1H16EFP00000",
        "tokens": ["x", "y"],
        "state": "online",
        "remote_start_enabled": True,
        "calendar_enabled": True,
        "notifications_enabled": True,
        "in_service": False,
    }


@pytest.fixture
def sample_vehicles_response(sample_vehicle: dict) -> dict:
    """Fixture providing a vehicle list response."""
    return {"response": [sample_vehicle], "count": 1}


@pytest.fixture
def sample_state_responses() -> dict:
    """Fixture providing responses for the six status endpoints, keyed by path."""
    return {
        "mobile_enabled": {"response": True},
        "data_request/charge_state": {
            "response": {
                "charging_state": "Charging",
                "battery_level": 64,
                "battery_range": 167.96,
                "charge_limit_soc": 90,
                "charge_port_door_open": True,
            },
        },
        "data_request/climate_state": {
            "response": {
                "inside_temp": 17.0,
                "outside_temp": 9.5,
                "driver_temp_setting": 22.6,
                "passenger_temp_setting": 22.6,
                "is_climate_on": False,
            },
        },
        "data_request/drive_state": {
            "response": {
                "shift_state": None,
                "speed": None,
                "latitude": 33.794839,
                "longitude": -84.401593,
                "heading": 4,
                "gps_as_of": 1359863204,
            },
        },
        "data_request/gui_settings": {
            "response": {
                "gui_distance_units": "mi/hr",
                "gui_temperature_units": "F",
                "gui_charge_rate_units": "mi/hr",
                "gui_24_hour_time": False,
                "gui_range_display": "Rated",
            },
        },
        "data_request/vehicle_state": {
            "response": {
                "df": False,
                "dr": False,
                "pf": False,
                "pr": False,
                "ft": False,
                "rt": True,
                "car_version": "1.19.42",
                "locked": True,
                "odometer": 2321.4,
                "sun_roof_state": "unknown",
                "valet_mode": False,
            },
        },
    }


@pytest.fixture
def token_factory():
    """Fixture providing the create_token helper."""
    return create_token


@pytest.fixture
def vehicle_endpoint():
    """Fixture providing the vehicle_url helper."""
    return vehicle_url


@pytest_asyncio.fixture
async def connection():
    """Fixture providing a connection to the production API."""
    conn = Connection()
    yield conn
    await conn.close()
