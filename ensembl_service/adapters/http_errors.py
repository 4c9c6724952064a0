"""Project-native typed exceptions for HTTP client tool failures."""

from __future__ import annotations


class HttpToolError(Exception):
    """Base exception for HTTP client tool failures.

    Attributes:
        status_code: Optional upstream HTTP status code.
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class HttpToolAllocationError(HttpToolError, RuntimeError):
    """The HTTP client tool could not be constructed."""


class HttpToolConfigurationError(HttpToolError, ValueError):
    """The HTTP client tool could not be set up for the requested call."""


class HttpToolTransportError(HttpToolError, ConnectionError):
    """Transport-level failure or non-success HTTP status from upstream."""


class HttpToolTimeoutError(HttpToolTransportError, TimeoutError):
    """Transport timeout while waiting for the upstream response."""
