"""Authentication token management for the Tesla owner API."""

#  SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import asyncio
import logging
from typing import NamedTuple

from . import endpoints
from .connection import Connection
from .const import CLIENT_ID, CLIENT_SECRET, GRANT_TYPE, TOKEN_LEEWAY
from .exceptions import TeslaAuthenticationRequiredError, TeslaExceptionError
from .models import AuthToken

_LOGGER = logging.getLogger(__name__)


class Credentials(NamedTuple):
    """Store credentials for the Tesla owner API."""

    email: str
    password: str

    def __repr__(self) -> str:
        """Return a representation that does not leak the password."""
        return f"Credentials(email={self.email!r}, password='***')"


class TokenManager:
    """Holds the access token and decides when to authenticate again.

    Re-authentication with the stored credentials happens transparently when
    the token is missing or expired. Only one authentication request is in
    flight at a time: callers arriving while it runs await the same task and
    get its token, or its error.

    :param connection: Connection used to send the authentication request
    :param credentials: Credentials or None
    :param token: token dict with access_token, expires_in, created_at as root params
    :param leeway: time in seconds to consider token as expired before it actually expires
    """

    def __init__(
        self,
        connection: Connection,
        credentials: Credentials | None = None,
        token: dict | None = None,
        leeway: int = TOKEN_LEEWAY,
    ) -> None:
        """Initialise the token manager."""
        self.connection = connection
        self.credentials = credentials
        self.token = AuthToken(token) if token else None
        self.leeway = leeway
        self.renewal: asyncio.Task | None = None

    @property
    def is_authenticated(self) -> bool:
        """Return true if a token is held."""
        return self.token is not None

    def check_token(self) -> bool:
        """Return true if the current token is valid."""
        return self.token is not None and self.token.is_valid(self.leeway)

    async def check_authentication(self) -> AuthToken:
        """Return a valid token, authenticating again if necessary."""
        if self.check_token():
            return self.token

        if self.renewal is None:
            if self.credentials is None:
                msg = "Authentication required, no credentials available"
                raise TeslaAuthenticationRequiredError(msg)
            _LOGGER.debug("Token missing or expired, authenticating again")
            self._start_renewal()
        return await asyncio.shield(self.renewal)

    async def authenticate(self, email: str, password: str) -> AuthToken:
        """Authenticate with email and password.

        The credentials are kept so the token can be renewed later without
        asking again. A renewal already in flight is waited for first, so the
        new credentials always get a request of their own.
        """
        self.credentials = Credentials(email, password)
        while self.renewal is not None:
            await asyncio.wait([self.renewal])
        return await asyncio.shield(self._start_renewal())

    def _start_renewal(self) -> asyncio.Task:
        self.renewal = asyncio.ensure_future(self._fetch_token(self.credentials))
        self.renewal.add_done_callback(self._renewal_done)
        return self.renewal

    def _renewal_done(self, task: asyncio.Task) -> None:
        if self.renewal is task:
            self.renewal = None
        if not task.cancelled() and task.exception() is not None:
            _LOGGER.debug("Authentication failed: %s", task.exception())

    async def _fetch_token(self, credentials: Credentials) -> AuthToken:
        body = {
            "email": credentials.email,
            "password": credentials.password,
            "grant_type": GRANT_TYPE,
            "client_id": CLIENT_ID,
            "client_secret": CLIENT_SECRET,
        }
        _LOGGER.debug("Requesting access token for %s", credentials.email)
        try:
            token = await self.connection.request_object(AuthToken, endpoints.authentication(), body=body)
        except TeslaExceptionError:
            self.token = None
            raise

        self.token = token
        _LOGGER.debug("New access token, expires at %s", self.token.expires_at)
        return self.token
