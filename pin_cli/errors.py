"""Exception types raised by the pin CLI."""

from typing import Optional


class PinError(Exception):
    """Base class for every error the CLI reports to the user."""


class UsageError(PinError):
    """Invalid or missing command-line arguments."""


class NetworkError(PinError):
    """The request never produced an HTTP response."""


class APIError(PinError):
    """The service answered with a non-200 status.

    The message is the response body verbatim.
    """

    def __init__(self, body: str, status_code: Optional[int] = None) -> None:
        super().__init__(body)
        self.body = body
        self.status_code = status_code


class TagParseError(PinError):
    """The tag listing could not be deserialized."""
