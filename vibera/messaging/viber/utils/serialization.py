"""
Payload serialization helpers for outgoing Viber requests.
"""

import json
from collections.abc import Mapping, Sized
from typing import Any

from pydantic import BaseModel


def serialize_tracking_data(tracking_data: Any) -> str:
    """Encode tracking data as the JSON string the platform round-trips.

    ``None``, empty values and bare numbers or booleans are sent as the encoded
    empty string (``'""'``), never as ``null``: the platform rejects a null
    tracking_data. Pydantic models are dumped before encoding.
    """
    if isinstance(tracking_data, BaseModel):
        tracking_data = tracking_data.model_dump(mode="json")
    if (
        tracking_data is None
        or isinstance(tracking_data, (bool, int, float))
        or (isinstance(tracking_data, Sized) and len(tracking_data) == 0)
    ):
        tracking_data = ""
    return json.dumps(tracking_data, separators=(",", ":"), ensure_ascii=False)


def message_data_to_dict(message_data: Any) -> dict[str, Any]:
    """Convert message data (model or mapping) into a plain dict for merging."""
    if message_data is None:
        return {}
    if isinstance(message_data, BaseModel):
        if hasattr(message_data, "to_message_data"):
            return message_data.to_message_data()
        return message_data.model_dump(by_alias=True, exclude_none=True)
    if isinstance(message_data, Mapping):
        return dict(message_data)
    raise TypeError(
        f"message data must be a mapping or a message model, got {type(message_data).__name__}"
    )


def keyboard_to_dict(keyboard: Any) -> Any:
    """Convert a Keyboard model to its payload; mappings pass through."""
    if isinstance(keyboard, BaseModel):
        if hasattr(keyboard, "to_payload"):
            return keyboard.to_payload()
        return keyboard.model_dump(by_alias=True, exclude_none=True)
    return keyboard


def compact(payload: dict[str, Any]) -> dict[str, Any]:
    """Drop top-level keys whose value is None so they are absent from the JSON body."""
    return {key: value for key, value in payload.items() if value is not None}
