"""
Vibera - async client for the Viber bot API.

Clean Import Interface:
- The client, the bot identity and the exceptions are exposed at top level
- Message models available via vibera.messaging.viber.models
"""

from .core.config.settings import settings
from .messaging.viber.client import ViberClient
from .messaging.viber.exceptions import (
    ArgumentError,
    EndpointError,
    ViberApiError,
    ViberClientError,
)
from .messaging.viber.models import BotConfiguration, UserProfile

__version__ = settings.version

__all__ = [
    "ViberClient",
    "BotConfiguration",
    "UserProfile",
    "ArgumentError",
    "EndpointError",
    "ViberApiError",
    "ViberClientError",
]
