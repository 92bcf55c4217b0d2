"""
Viber bot API client.

Key Design Decisions:
- One coroutine per platform capability, all funnelled through _send_request
- A response is successful only when its body carries status 0, whatever the HTTP code
- Lookup operations validate eagerly and raise before any coroutine exists
- Optional dependency injection of a shared aiohttp session
"""

import asyncio
from collections.abc import Awaitable, Mapping, Sequence
from typing import Any

import aiohttp
from pydantic import BaseModel

from vibera.core.config.settings import settings
from vibera.core.logging.logger import ContextLogger, get_logger
from vibera.messaging.viber.exceptions import (
    ArgumentError,
    EndpointError,
    ViberApiError,
)
from vibera.messaging.viber.models.basic_models import ClientConfig
from vibera.messaging.viber.utils.error_helpers import describe_status
from vibera.messaging.viber.utils.serialization import (
    compact,
    keyboard_to_dict,
    message_data_to_dict,
    serialize_tracking_data,
)
from vibera.schemas.core.types import DEFAULT_EVENT_TYPES

SUCCESS_STATUS = 0
VIBER_AUTH_TOKEN_HEADER = "X-Viber-Auth-Token"
USER_AGENT_PRODUCT = "Vibera-Python"

MAX_GET_ONLINE_IDS = 100
MAX_BROADCAST_RECEIVERS = 300

# Documented platform limits, not enforced by the client
MAX_REQUEST_SIZE_BYTES = 30 * 1024
BROADCAST_RATE_LIMIT = (500, 10)  # requests, seconds

API_ENDPOINTS: dict[str, str] = {
    "setWebhook": "/set_webhook",
    "getAccountInfo": "/get_account_info",
    "getUserDetails": "/get_user_details",
    "getOnlineStatus": "/get_online",
    "sendMessage": "/send_message",
    "broadcastMessage": "/broadcast_message",
    "post": "/post",
}


class ViberUrlBuilder:
    """Builds URLs for Viber bot API endpoints."""

    def __init__(self, base_url: str, endpoints: Mapping[str, str] = API_ENDPOINTS):
        """Initialize URL builder.

        Args:
            base_url: Viber bot API base URL
            endpoints: Logical endpoint name to path mapping
        """
        self.base_url = base_url.rstrip("/")
        self.endpoints = endpoints

    def has_endpoint(self, endpoint: str) -> bool:
        return endpoint in self.endpoints

    def get_endpoint_url(self, endpoint: str) -> str:
        """Build URL for a logical endpoint name.

        Raises:
            EndpointError: If the endpoint name is not known
        """
        if not self.has_endpoint(endpoint):
            raise EndpointError(endpoint)
        return f"{self.base_url}{self.endpoints[endpoint]}"


class ViberClient:
    """
    Viber bot API client.

    Every operation returns a coroutine resolving to the full response body
    when the platform answers with status 0. Failures surface as:
    - ArgumentError: raised synchronously by get_user_details and
      get_online_status, raised on await by every other operation
    - EndpointError: unknown endpoint name (internal misuse)
    - ViberApiError: non-zero status, carrying the raw body
    - aiohttp.ClientError / asyncio.TimeoutError: transport failures, re-raised as is
    """

    def __init__(
        self,
        bot: Any,
        *,
        logger: Any | None = None,
        api_url: str = settings.api_url,
        subscribed_events: Sequence[str] | None = None,
        session: aiohttp.ClientSession | None = None,
        version: str = settings.version,
    ):
        """Initialize the client.

        Args:
            bot: Bot identity exposing ``name``, ``avatar`` and ``auth_token``
            logger: Logger exposing info/debug/error with format arguments
            api_url: Viber bot API base URL
            subscribed_events: Webhook event types sent on set_webhook
            session: Optional shared aiohttp session; one session per request otherwise
            version: Version embedded in the User-Agent header
        """
        events = DEFAULT_EVENT_TYPES if subscribed_events is None else subscribed_events
        self.config = ClientConfig(
            base_url=api_url,
            bot_name=bot.name,
            bot_avatar_url=getattr(bot, "avatar", None),
            auth_token=bot.auth_token,
            subscribed_event_types=tuple(
                getattr(event, "value", event) for event in events
            ),
        )
        self.session = session
        self.user_agent = f"{USER_AGENT_PRODUCT}/{version}"
        self.url_builder = ViberUrlBuilder(self.config.base_url)

        self.logger = logger or get_logger(__name__)
        if isinstance(self.logger, ContextLogger):
            self.logger = self.logger.bind(bot=self.config.bot_name)

        self.logger.debug(
            "Viber client initialized for %s (%s)", self.config.base_url, self.user_agent
        )

    @property
    def subscribed_events(self) -> list[str]:
        return list(self.config.subscribed_event_types)

    async def set_webhook(self, url: str, is_inline: bool = False) -> dict[str, Any]:
        """Register the webhook URL the platform delivers callbacks to.

        Args:
            url: HTTPS URL of the webhook (empty string removes the webhook)
            is_inline: Whether the bot is used for inline queries

        Returns:
            Response body, including the accepted ``event_types``
        """
        self.logger.info(
            "Sending 'setWebhook' request for url: %s, isInline: %s", url, is_inline
        )
        return await self._send_request(
            "setWebhook",
            {
                "url": url,
                "is_inline": is_inline,
                "event_types": self.subscribed_events,
            },
        )

    async def send_message(
        self,
        receiver: str | None,
        message_type: str | None = None,
        message_data: Any = None,
        tracking_data: Any = None,
        keyboard: Any = None,
        chat_id: str | None = None,
        min_api_version: int | None = None,
    ) -> dict[str, Any]:
        """Send a message to a single user or to a chat.

        Args:
            receiver: Viber user id (optional when chat_id is given)
            message_type: Message type name, e.g. "text"
            message_data: Message fields (mapping or message model), merged over the envelope
            tracking_data: Arbitrary data echoed back in callbacks
            keyboard: Keyboard mapping or Keyboard model
            chat_id: Chat identifier, used instead of receiver
            min_api_version: Minimal client API version required to show the message

        Returns:
            Response body, including ``message_token``

        Raises:
            ArgumentError: Receiver/chat id missing, or nothing to send
            ViberApiError: Non-success status from the platform
        """
        if _missing(receiver) and _missing(chat_id):
            raise ArgumentError("missing receiver and chat id")
        self._validate_message(message_type, message_data, keyboard)

        request = self._build_envelope(
            tracking_data, keyboard, min_api_version, chat_id=chat_id
        )
        if not _missing(receiver):
            request["receiver"] = receiver

        send_logger = self.logger
        if isinstance(send_logger, ContextLogger) and not _missing(receiver):
            send_logger = send_logger.bind(user_id=receiver)
        send_logger.debug(
            "Sending %s message to viber user '%s' with data %s",
            message_type,
            receiver,
            message_data,
        )
        request.update(message_data_to_dict(message_data))
        return await self._send_request("sendMessage", request)

    async def broadcast_message(
        self,
        receivers: Sequence[str] | None,
        message_type: str | None = None,
        message_data: Any = None,
        tracking_data: Any = None,
        keyboard: Any = None,
        min_api_version: int | None = None,
    ) -> dict[str, Any]:
        """Send the same message to up to 300 users at once.

        The platform allows 500 broadcast requests per 10 seconds and a
        30kb request body; staying within them is the caller's job.

        Returns:
            Response body, including ``failed_list`` for undelivered receivers

        Raises:
            ArgumentError: Receivers missing or above 300, or nothing to send
            ViberApiError: Non-success status from the platform
        """
        if _missing(receivers):
            raise ArgumentError("missing receivers")
        if len(receivers) > MAX_BROADCAST_RECEIVERS:
            raise ArgumentError("too many receivers")
        self._validate_message(message_type, message_data, keyboard)

        request = self._build_envelope(
            tracking_data, keyboard, min_api_version, broadcast_list=list(receivers)
        )

        self.logger.debug(
            "Broadcasting %s message to %d viber users with data %s",
            message_type,
            len(receivers),
            message_data,
        )
        request.update(message_data_to_dict(message_data))
        return await self._send_request("broadcastMessage", request)

    async def get_account_info(self) -> dict[str, Any]:
        """Fetch the bot account details (name, uri, subscribers count, webhook...)."""
        return await self._send_request("getAccountInfo", {})

    def get_user_details(self, user_id: str) -> Awaitable[dict[str, Any]]:
        """Fetch the profile of a subscribed user.

        Validation happens before the request coroutine is created, so an
        invalid id raises immediately rather than on await.

        Raises:
            ArgumentError: If user_id is empty
        """
        if not user_id:
            raise ArgumentError("missing user id")
        return self._send_request("getUserDetails", {"id": user_id})

    def get_online_status(
        self, user_ids: str | Sequence[str]
    ) -> Awaitable[dict[str, Any]]:
        """Fetch the online status of one user id or a list of up to 100.

        Raises:
            ArgumentError: Immediately, for no ids or more than 100
        """
        ids = list(user_ids) if isinstance(user_ids, (list, tuple)) else [user_ids]

        if not ids:
            raise ArgumentError("empty ids")
        if len(ids) > MAX_GET_ONLINE_IDS:
            raise ArgumentError("too many ids")

        return self._send_request("getOnlineStatus", {"ids": ids})

    async def post_to_public_chat(
        self,
        sender_profile: Any,
        message_type: str | None,
        message_data: Any,
        min_api_version: int | None = None,
    ) -> dict[str, Any]:
        """Post a message to the bot's public chat on behalf of an admin.

        Args:
            sender_profile: Admin profile exposing ``id``, ``name`` and ``avatar``
                (UserProfile, mapping or any object with those attributes)
            message_type: Message type name; a keyboard cannot replace it here
            message_data: Message fields merged over the request

        Raises:
            ArgumentError: Sender profile, message type or data missing
            ViberApiError: Non-success status from the platform
        """
        if _missing(sender_profile):
            raise ArgumentError("missing sender profile")
        if _missing(message_type) or _missing(message_data):
            raise ArgumentError("missing message data or type")

        sender_id = _profile_field(sender_profile, "id")
        request = compact(
            {
                "from": sender_id,
                "sender": compact(
                    {
                        "name": _profile_field(sender_profile, "name"),
                        "avatar": _profile_field(sender_profile, "avatar"),
                    }
                ),
                "min_api_version": min_api_version,
            }
        )

        self.logger.debug(
            "Sending %s message to public chat as viber user '%s' with data %s",
            message_type,
            sender_id,
            message_data,
        )
        request.update(message_data_to_dict(message_data))
        return await self._send_request("post", request)

    # Request construction

    @staticmethod
    def _validate_message(message_type: Any, message_data: Any, keyboard: Any) -> None:
        if not _missing(message_type) and _missing(message_data):
            raise ArgumentError("missing message data")
        if _missing(message_type) and _missing(message_data) and _missing(keyboard):
            raise ArgumentError("nothing to send")

    def _build_envelope(
        self,
        tracking_data: Any,
        keyboard: Any,
        min_api_version: int | None,
        **targets: Any,
    ) -> dict[str, Any]:
        """Common request envelope; keys left as None are omitted from the body."""
        return compact(
            {
                "sender": compact(
                    {
                        "name": self.config.bot_name,
                        "avatar": self.config.bot_avatar_url,
                    }
                ),
                "tracking_data": serialize_tracking_data(tracking_data),
                "keyboard": keyboard_to_dict(keyboard),
                **targets,
                "min_api_version": min_api_version,
            }
        )

    def _get_headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            VIBER_AUTH_TOKEN_HEADER: self.config.auth_token,
            "User-Agent": self.user_agent,
        }

    # Dispatch

    async def _send_request(self, endpoint: str, data: dict[str, Any]) -> dict[str, Any]:
        """POST a payload to a logical endpoint and interpret the response.

        Caller data is applied over ``auth_token``, so a message field named
        ``auth_token`` replaces the bot token in the body (not in the header).
        """
        url = self.url_builder.get_endpoint_url(endpoint)
        payload = {"auth_token": self.config.auth_token, **data}

        self.logger.debug("Opening request to url: '%s' with data %s", url, data)
        try:
            response_data = await self._post_json(url, payload)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as err:
            self.logger.error("Request to '%s' ended with an error: %s", url, err)
            raise

        return self._read_data(response_data)

    async def _post_json(self, url: str, payload: dict[str, Any]) -> Any:
        if self.session is not None:
            return await self._post_with_session(self.session, url, payload)

        async with aiohttp.ClientSession() as session:
            return await self._post_with_session(session, url, payload)

    async def _post_with_session(
        self, session: aiohttp.ClientSession, url: str, payload: dict[str, Any]
    ) -> Any:
        # ssl=True: default context with certificate verification
        async with session.post(
            url, json=payload, headers=self._get_headers(), ssl=True
        ) as response:
            self.logger.debug("Response status %s from '%s'", response.status, url)
            return await response.json(content_type=None)

    def _read_data(self, data: Any) -> dict[str, Any]:
        status = data.get("status") if isinstance(data, dict) else None
        if status != SUCCESS_STATUS:
            self.logger.error(
                "Response error (%s): %s", describe_status(status), data
            )
            raise ViberApiError(data)

        self.logger.debug("Response data %s", data)
        return data


def _missing(value: Any) -> bool:
    """Absent argument: None or a falsy scalar. Empty containers count as given."""
    if isinstance(value, (Mapping, list, tuple, BaseModel)):
        return False
    return not value


def _profile_field(profile: Any, name: str) -> Any:
    if isinstance(profile, Mapping):
        return profile.get(name)
    return getattr(profile, name, None)
