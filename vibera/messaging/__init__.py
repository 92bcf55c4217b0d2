"""
Vibera Messaging Components

Usage:
    from vibera.messaging import ViberClient
    from vibera.messaging.viber.models import BotConfiguration, TextMessage
"""

from .viber.client import ViberClient, ViberUrlBuilder
from .viber.exceptions import (
    ArgumentError,
    EndpointError,
    ViberApiError,
    ViberClientError,
)

__all__ = [
    "ViberClient",
    "ViberUrlBuilder",
    "ArgumentError",
    "EndpointError",
    "ViberApiError",
    "ViberClientError",
]
