"""
Exceptions raised by the Viber client.

Transport failures are not wrapped: aiohttp errors reach the caller as raised.
"""

from typing import Any


class ViberClientError(Exception):
    """Base exception for Viber client errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ArgumentError(ViberClientError, ValueError):
    """Raised when an operation is called with invalid or missing arguments."""


class EndpointError(ViberClientError):
    """Raised when a request is dispatched to an endpoint name the client does not know."""

    def __init__(self, endpoint: str):
        self.endpoint = endpoint
        super().__init__(f"unknown endpoint: {endpoint}")


class ViberApiError(ViberClientError):
    """Raised when the platform answers with a non-success status.

    The parsed response body is kept untouched in ``response``.
    """

    def __init__(self, response: Any):
        self.response = response
        if isinstance(response, dict):
            self.status = response.get("status")
            self.status_message = response.get("status_message")
        else:
            self.status = None
            self.status_message = None
        super().__init__(
            f"Viber API error (status={self.status}): {self.status_message or response}"
        )
