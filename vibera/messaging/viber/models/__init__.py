"""Viber models package."""

from .basic_models import BotConfiguration, ClientConfig, UserProfile
from .message_models import (
    BaseViberMessage,
    Contact,
    ContactMessage,
    FileMessage,
    Keyboard,
    Location,
    LocationMessage,
    PictureMessage,
    RichMediaMessage,
    StickerMessage,
    TextMessage,
    UrlMessage,
    VideoMessage,
    ViberMessage,
    parse_message,
)

__all__ = [
    "BotConfiguration",
    "ClientConfig",
    "UserProfile",
    "BaseViberMessage",
    "Contact",
    "ContactMessage",
    "FileMessage",
    "Keyboard",
    "Location",
    "LocationMessage",
    "PictureMessage",
    "RichMediaMessage",
    "StickerMessage",
    "TextMessage",
    "UrlMessage",
    "VideoMessage",
    "ViberMessage",
    "parse_message",
]
