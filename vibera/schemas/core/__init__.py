"""
Core schema types for the Viber bot API.
"""

from .types import DEFAULT_EVENT_TYPES, EventType, MessageType, StatusCode

__all__ = ["DEFAULT_EVENT_TYPES", "EventType", "MessageType", "StatusCode"]
