"""
Outgoing message models for Viber messaging.

Each model describes the fields one message type contributes to a send,
broadcast or post request. The client merges ``to_message_data()`` over the
request envelope, so message fields take precedence over envelope defaults.
Plain mappings are accepted everywhere a model is.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from vibera.schemas.core.types import MessageType


class BaseViberMessage(BaseModel):
    """Common behaviour for outgoing message models."""

    type: str

    def to_message_data(self) -> dict[str, Any]:
        """Message fields as merged into the request body."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TextMessage(BaseViberMessage):
    type: Literal["text"] = MessageType.TEXT.value
    text: str = Field(..., min_length=1, max_length=7000)


class UrlMessage(BaseViberMessage):
    type: Literal["url"] = MessageType.URL.value
    media: str = Field(..., max_length=2000, description="URL to open")


class PictureMessage(BaseViberMessage):
    type: Literal["picture"] = MessageType.PICTURE.value
    media: str = Field(..., description="Image URL (jpeg, png, non-animated gif)")
    text: str = Field("", max_length=768, description="Picture description")
    thumbnail: str | None = None


class VideoMessage(BaseViberMessage):
    type: Literal["video"] = MessageType.VIDEO.value
    media: str
    size: int = Field(..., gt=0, description="Video size in bytes")
    duration: int | None = Field(None, ge=0, le=180, description="Seconds")
    thumbnail: str | None = None


class FileMessage(BaseViberMessage):
    type: Literal["file"] = MessageType.FILE.value
    media: str
    size: int = Field(..., gt=0, description="File size in bytes")
    file_name: str = Field(..., max_length=256)


class Contact(BaseModel):
    name: str = Field(..., max_length=28)
    phone_number: str = Field(..., max_length=18)


class ContactMessage(BaseViberMessage):
    type: Literal["contact"] = MessageType.CONTACT.value
    contact: Contact


class Location(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)


class LocationMessage(BaseViberMessage):
    type: Literal["location"] = MessageType.LOCATION.value
    location: Location


class StickerMessage(BaseViberMessage):
    type: Literal["sticker"] = MessageType.STICKER.value
    sticker_id: int


class RichMediaMessage(BaseViberMessage):
    """Carousel of buttons. The rich media layout itself is passed through untouched."""

    type: Literal["rich_media"] = MessageType.RICH_MEDIA.value
    rich_media: dict[str, Any]
    alt_text: str | None = None


ViberMessage = Annotated[
    TextMessage
    | UrlMessage
    | PictureMessage
    | VideoMessage
    | FileMessage
    | ContactMessage
    | LocationMessage
    | StickerMessage
    | RichMediaMessage,
    Field(discriminator="type"),
]

_message_adapter: TypeAdapter[ViberMessage] = TypeAdapter(ViberMessage)


def parse_message(data: dict[str, Any]) -> BaseViberMessage:
    """Validate a raw message mapping into the matching message model.

    Raises:
        pydantic.ValidationError: If the type is unknown or fields are invalid
    """
    return _message_adapter.validate_python(data)


class Keyboard(BaseModel):
    """Custom keyboard attached to a message. Serialized with the platform's PascalCase keys."""

    model_config = ConfigDict(populate_by_name=True)

    type: Literal["keyboard"] = Field(MessageType.KEYBOARD.value, alias="Type")
    buttons: list[dict[str, Any]] = Field(..., alias="Buttons", min_length=1)
    default_height: bool | None = Field(None, alias="DefaultHeight")
    bg_color: str | None = Field(None, alias="BgColor")
    input_field_state: Literal["regular", "minimized", "hidden"] | None = Field(
        None, alias="InputFieldState"
    )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
