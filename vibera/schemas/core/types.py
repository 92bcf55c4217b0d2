"""
Data types and enums for the Viber bot API.

Values are the literal strings and integers used on the wire.
"""

from enum import Enum, IntEnum


class EventType(str, Enum):
    """Webhook event types a bot can subscribe to."""

    DELIVERED = "delivered"
    SEEN = "seen"
    FAILED = "failed"
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"
    CONVERSATION_STARTED = "conversation_started"
    MESSAGE = "message"  # Always delivered, cannot be filtered out
    WEBHOOK = "webhook"  # Callback confirming set_webhook


DEFAULT_EVENT_TYPES: list[str] = [
    EventType.DELIVERED.value,
    EventType.SEEN.value,
    EventType.FAILED.value,
    EventType.SUBSCRIBED.value,
    EventType.UNSUBSCRIBED.value,
    EventType.CONVERSATION_STARTED.value,
]


class MessageType(str, Enum):
    """Outgoing message types supported by send_message / broadcast_message / post."""

    TEXT = "text"
    PICTURE = "picture"
    VIDEO = "video"
    FILE = "file"
    CONTACT = "contact"
    LOCATION = "location"
    URL = "url"
    STICKER = "sticker"
    RICH_MEDIA = "rich_media"
    KEYBOARD = "keyboard"


class StatusCode(IntEnum):
    """Status codes returned in the ``status`` field of every API response."""

    OK = 0
    INVALID_URL = 1
    INVALID_AUTH_TOKEN = 2
    BAD_DATA = 3
    MISSING_DATA = 4
    RECEIVER_NOT_REGISTERED = 5
    RECEIVER_NOT_SUBSCRIBED = 6
    PUBLIC_ACCOUNT_BLOCKED = 7
    PUBLIC_ACCOUNT_NOT_FOUND = 8
    PUBLIC_ACCOUNT_SUSPENDED = 9
    WEBHOOK_NOT_SET = 10
    RECEIVER_NO_SUITABLE_DEVICE = 11
    TOO_MANY_REQUESTS = 12
    API_VERSION_NOT_SUPPORTED = 13
    INCOMPATIBLE_WITH_VERSION = 14

    @property
    def platform_name(self) -> str:
        """Status name as documented by the platform (camelCase)."""
        head, *rest = self.name.lower().split("_")
        return head + "".join(part.capitalize() for part in rest)
