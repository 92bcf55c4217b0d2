"""
Tests for payload helpers, message models and error helpers.
"""

import aiohttp
import pytest
from pydantic import ValidationError

from vibera.messaging.viber.exceptions import ArgumentError, ViberApiError
from vibera.messaging.viber.models.message_models import (
    ContactMessage,
    Keyboard,
    Location,
    LocationMessage,
    StickerMessage,
    TextMessage,
    parse_message,
)
from vibera.messaging.viber.utils.error_helpers import (
    describe_status,
    is_authentication_error,
    is_rate_limited,
)
from vibera.messaging.viber.utils.serialization import (
    compact,
    message_data_to_dict,
    serialize_tracking_data,
)
from vibera.schemas.core.types import StatusCode


class TestTrackingData:
    @pytest.mark.parametrize("value", [None, {}, [], "", 0, 5, 2.5, True, False])
    def test_empty_values_become_encoded_empty_string(self, value):
        assert serialize_tracking_data(value) == '""'

    def test_mapping_is_compact_json(self):
        assert serialize_tracking_data({"a": 1}) == '{"a":1}'

    def test_model_is_dumped_before_encoding(self):
        location = Location(lat=10.5, lon=-3.0)

        assert serialize_tracking_data(location) == '{"lat":10.5,"lon":-3.0}'

    def test_string_is_json_encoded(self):
        assert serialize_tracking_data("step-2") == '"step-2"'

    def test_non_ascii_is_kept(self):
        assert serialize_tracking_data({"name": "Ana María"}) == '{"name":"Ana María"}'


class TestMessageData:
    def test_none_is_empty(self):
        assert message_data_to_dict(None) == {}

    def test_mapping_is_copied(self):
        data = {"type": "text", "text": "hi"}

        result = message_data_to_dict(data)

        assert result == data
        assert result is not data

    def test_model_drops_unset_optionals(self):
        message = ContactMessage(contact={"name": "Itamar", "phone_number": "+972511123123"})

        assert message_data_to_dict(message) == {
            "type": "contact",
            "contact": {"name": "Itamar", "phone_number": "+972511123123"},
        }

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            message_data_to_dict("text")

    def test_compact_keeps_falsy_non_none_values(self):
        assert compact({"a": None, "b": 0, "c": "", "d": False}) == {
            "b": 0,
            "c": "",
            "d": False,
        }


class TestMessageModels:
    def test_parse_message_selects_model_by_type(self):
        message = parse_message({"type": "location", "location": {"lat": 37.7, "lon": -122.4}})

        assert isinstance(message, LocationMessage)
        assert message.location.lat == 37.7

    def test_parse_message_unknown_type(self):
        with pytest.raises(ValidationError):
            parse_message({"type": "hologram"})

    def test_text_length_is_validated(self):
        with pytest.raises(ValidationError):
            TextMessage(text="")

    def test_sticker(self):
        assert StickerMessage(sticker_id=46105).to_message_data() == {
            "type": "sticker",
            "sticker_id": 46105,
        }

    def test_keyboard_uses_platform_keys(self):
        keyboard = Keyboard(
            buttons=[{"ActionType": "reply", "ActionBody": "yes", "Text": "Yes"}],
            input_field_state="hidden",
        )

        assert keyboard.to_payload() == {
            "Type": "keyboard",
            "Buttons": [{"ActionType": "reply", "ActionBody": "yes", "Text": "Yes"}],
            "InputFieldState": "hidden",
        }

    def test_keyboard_requires_buttons(self):
        with pytest.raises(ValidationError):
            Keyboard(buttons=[])


class TestErrorHelpers:
    def test_describe_known_status(self):
        assert describe_status(2) == "invalidAuthToken"
        assert describe_status(StatusCode.RECEIVER_NOT_SUBSCRIBED) == "receiverNotSubscribed"

    @pytest.mark.parametrize("status", [None, 99, "oops"])
    def test_describe_unknown_status(self, status):
        assert describe_status(status) == "generalError"

    def test_authentication_error_from_status(self):
        error = ViberApiError({"status": 2, "status_message": "invalidAuthToken"})

        assert is_authentication_error(error)
        assert not is_rate_limited(error)

    def test_authentication_error_from_http_status(self):
        error = aiohttp.ClientResponseError(None, (), status=401)

        assert is_authentication_error(error)

    def test_rate_limited(self):
        assert is_rate_limited(ViberApiError({"status": 12}))

    def test_argument_error_is_value_error(self):
        error = ArgumentError("missing user id")

        assert isinstance(error, ValueError)
        assert error.message == "missing user id"
