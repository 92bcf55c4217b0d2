"""
Basic models for the Viber bot client.

Pydantic schemas for the bot identity, the client configuration and the
sender profile used when posting to a public chat.
"""

from pydantic import BaseModel, ConfigDict, Field


class BotConfiguration(BaseModel):
    """Bot identity: the name and avatar shown to users and the auth token."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, max_length=28, description="Bot name")
    avatar: str | None = Field(None, description="Avatar URL (720x720, 100kb max)")
    auth_token: str = Field(..., min_length=1, description="Bot auth token")


class ClientConfig(BaseModel):
    """Immutable configuration owned by a ViberClient instance."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    bot_name: str
    bot_avatar_url: str | None = None
    auth_token: str
    subscribed_event_types: tuple[str, ...] = ()


class UserProfile(BaseModel):
    """Viber user profile, as returned by get_user_details or used as a post sender."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1, description="Unique Viber user id")
    name: str | None = None
    avatar: str | None = None
    country: str | None = None
    language: str | None = None
    api_version: int | None = None
