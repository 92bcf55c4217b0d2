"""Viber utilities package."""

from .error_helpers import describe_status, is_authentication_error, is_rate_limited
from .serialization import (
    compact,
    keyboard_to_dict,
    message_data_to_dict,
    serialize_tracking_data,
)

__all__ = [
    "compact",
    "describe_status",
    "is_authentication_error",
    "is_rate_limited",
    "keyboard_to_dict",
    "message_data_to_dict",
    "serialize_tracking_data",
]
