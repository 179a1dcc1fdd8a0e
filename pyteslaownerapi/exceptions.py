#  SPDX-License-Identifier: Apache-2.0
"""Exceptions used for the Tesla owner API."""


class TeslaExceptionError(Exception):
    """Class of Tesla API exceptions."""

    def __init__(self, code=None, *args, **kwargs) -> None:
        """Initialize exceptions for the Tesla API."""
        self.message = ""
        self.code = None
        super().__init__(*args, **kwargs)
        if code is not None:
            self.code = code
            if isinstance(code, str):
                self.message = self.code
                return
            if self.code == 400:
                self.message = "BAD_REQUEST"
            elif self.code == 401:
                self.message = "UNAUTHORIZED"
            elif self.code == 403:
                self.message = "FORBIDDEN"
            elif self.code == 404:
                self.message = "NOT_FOUND"
            elif self.code == 405:
                self.message = "MOBILE_ACCESS_DISABLED"
            elif self.code == 408:
                self.message = "VEHICLE_UNAVAILABLE"
            elif self.code == 429:
                self.message = "TOO_MANY_REQUESTS"
            elif self.code == 500:
                self.message = "SERVER_ERROR"
            elif self.code == 503:
                self.message = "SERVICE_MAINTENANCE"
            elif self.code == 504:
                self.message = "UPSTREAM_TIMEOUT"
            elif self.code > 299:
                self.message = f"UNKNOWN_ERROR_{self.code}"

    def __str__(self) -> str:
        """Return the message, falling back to the exception arguments."""
        return self.message or super().__str__()


class TeslaNetworkError(TeslaExceptionError):
    """Error raised when a request to the API fails.

    The underlying transport, HTTP or decoding error is chained as
    ``__cause__``. For HTTP errors ``code`` holds the status code.
    """


class TeslaAuthenticationRequiredError(TeslaExceptionError):
    """Class of exceptions when no credentials are available to authenticate."""


class TeslaInvalidOptionsForCommandError(TeslaExceptionError):
    """Error when a command is sent without its required options."""
