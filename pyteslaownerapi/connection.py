#  SPDX-License-Identifier: Apache-2.0
"""Python Package for sending requests to the Tesla owner API."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from .const import SECRET_FIELDS, TIMEOUT, USER_AGENT
from .endpoints import Endpoint, resolve
from .exceptions import TeslaNetworkError

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def redact(body: Any) -> Any:
    """Return a copy of a request body with secrets masked."""
    if isinstance(body, dict):
        return {k: "***" if k in SECRET_FIELDS and v is not None else redact(v) for k, v in body.items()}
    if isinstance(body, list):
        return [redact(v) for v in body]
    return body


def redact_url(url: httpx.URL) -> httpx.URL:
    """Return the URL with secret query parameters masked."""
    for field in SECRET_FIELDS:
        if field in url.params:
            url = url.copy_set_param(field, "***")
    return url


class Connection:
    """Sends requests to the Tesla owner API.

    :param async_client: httpx.AsyncClient or None
    :param use_mock_server: send requests to the mock server instead of the production API
    :param debugging_enabled: log outgoing requests and their bodies
    """

    def __init__(
        self,
        async_client: httpx.AsyncClient | None = None,
        use_mock_server: bool = False,
        debugging_enabled: bool = False,
    ) -> None:
        """Initialise the connection to the Tesla owner API."""
        if async_client is None:
            async_client = httpx.AsyncClient()
        self.asyncClient = async_client
        self.use_mock_server = use_mock_server
        self.debugging_enabled = debugging_enabled
        self.headers = {"User-Agent": USER_AGENT}

    def build_request(self, endpoint: Endpoint, body=None, token: str | None = None) -> httpx.Request:
        """Build the HTTP request for an endpoint."""
        method, url = resolve(endpoint, self.use_mock_server)
        headers = dict(self.headers)
        if token is not None:
            headers["Authorization"] = f"Bearer {token}"

        json = None
        if body is not None:
            json = body.to_json() if hasattr(body, "to_json") else body
            headers["Content-Type"] = "application/json"

        request = self.asyncClient.build_request(method, url, headers=headers, json=json, timeout=TIMEOUT)

        if self.debugging_enabled:
            _LOGGER.debug("Request method - url: %s %s", request.method, redact_url(request.url))
            if json is not None:
                _LOGGER.debug("Request body: %s", redact(json))
        return request

    async def request(self, endpoint: Endpoint, body=None, key_path: str | None = None, token: str | None = None) -> Any:
        """Send a request and return the decoded JSON, or the value under key_path."""
        request = self.build_request(endpoint, body, token)
        try:
            resp = await self.asyncClient.send(request)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError as exc:
            raise TeslaNetworkError(exc.response.status_code) from exc
        except httpx.HTTPError as exc:
            msg = f"Request to {endpoint.route} failed: {exc!r}"
            raise TeslaNetworkError(msg) from exc
        except ValueError as exc:
            msg = f"Could not decode response from {endpoint.route}"
            raise TeslaNetworkError(msg) from exc

        if self.debugging_enabled:
            _LOGGER.debug("Response status: %s", resp.status_code)

        if key_path is None:
            return data
        try:
            return data[key_path]
        except (KeyError, TypeError) as exc:
            msg = f"Response from {endpoint.route} has no '{key_path}'"
            raise TeslaNetworkError(msg) from exc

    async def request_object(
        self,
        model: Callable[[dict], T],
        endpoint: Endpoint,
        body=None,
        key_path: str | None = None,
        token: str | None = None,
    ) -> T:
        """Send a request and decode a single JSON object into model."""
        data = await self.request(endpoint, body, key_path, token)
        if not isinstance(data, dict):
            msg = f"Expected an object from {endpoint.route}, got {type(data).__name__}"
            raise TeslaNetworkError(msg)
        return model(data)

    async def request_list(
        self,
        model: Callable[[dict], T],
        endpoint: Endpoint,
        body=None,
        key_path: str | None = None,
        token: str | None = None,
    ) -> list[T]:
        """Send a request and decode a JSON array into a list of model."""
        data = await self.request(endpoint, body, key_path, token)
        if not isinstance(data, list):
            msg = f"Expected a list from {endpoint.route}, got {type(data).__name__}"
            raise TeslaNetworkError(msg)
        return [model(item) for item in data]

    async def close(self):
        """Close the asyncClient connection."""
        await self.asyncClient.aclose()
