"""
This module defines the exceptions raised by the ZeroEventHub client and server.

Every failure of a fetch surfaces as one of these, raised to the caller and chained to the
underlying cause where there is one:

* `ValidationError` - the request could not be built or parsed (e.g. no cursors supplied).
* `TransportError` - the HTTP exchange failed or the server answered with a non-2xx status.
* `MalformedResponse` - the response body violates the feed line schema, or an event payload
  could not be deserialized.
"""

from http import HTTPStatus


class ZeroEventHubError(Exception):
    """Base class for all errors raised by this package."""


class APIError(ZeroEventHubError, ValueError):
    """
    APIError has two attributes, `message` and `code`, which are set during initialization. The
    `message` attribute represents a human-readable error message, and the `code` attribute is an
    HTTP status code that can be used to indicate the type of error that occurred.
    """

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        return self.message

    def status(self) -> int:
        """Return the HTTP status code associated with this APIError."""
        return self.code


class ValidationError(APIError):
    """The parameters of a feed request are missing or invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, HTTPStatus.BAD_REQUEST)


class TransportError(ZeroEventHubError):
    """The request could not be sent, or the response status does not indicate success."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponse(ZeroEventHubError, ValueError):
    """The response body could not be decoded into events and checkpoints."""


def cursors_missing() -> ValidationError:
    """Return the error raised when a fetch is attempted without any cursors."""
    return ValidationError("cursors are missing")
