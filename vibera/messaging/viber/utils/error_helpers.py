"""
Viber error handling utilities.

Helpers to classify and describe failures returned by the Viber bot API.
"""

from typing import Any

import aiohttp

from vibera.messaging.viber.exceptions import ViberApiError
from vibera.schemas.core.types import StatusCode

GENERAL_ERROR = "generalError"


def describe_status(status: Any) -> str:
    """Return the platform's name for a response status code.

    Unknown codes map to ``generalError`` as documented by the platform.
    """
    try:
        return StatusCode(int(status)).platform_name
    except (TypeError, ValueError):
        return GENERAL_ERROR


def is_authentication_error(error: Exception) -> bool:
    """Check if an exception indicates an invalid or rejected auth token.

    Args:
        error: The exception to check

    Returns:
        True for status 2 (invalidAuthToken) responses and HTTP 401 errors
    """
    if isinstance(error, ViberApiError):
        return error.status == StatusCode.INVALID_AUTH_TOKEN
    if isinstance(error, aiohttp.ClientResponseError):
        return error.status == 401
    return False


def is_rate_limited(error: Exception) -> bool:
    """Check if the platform rejected the request for exceeding its rate limit."""
    return (
        isinstance(error, ViberApiError)
        and error.status == StatusCode.TOO_MANY_REQUESTS
    )
