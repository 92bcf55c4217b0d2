"""
Tests for the vibera command-line interface.

The client class is replaced by a recording fake so no request leaves the process.
"""

import json

import pytest
from typer.testing import CliRunner

from vibera.cli import main as cli_main
from vibera.core.config.settings import settings
from vibera.messaging.viber.exceptions import ArgumentError, ViberApiError

runner = CliRunner()


class RecordingClient:
    """Fake ViberClient recording calls; behaves like the real one for lookups."""

    calls: list[tuple] = []
    error: Exception | None = None

    def __init__(self, bot, **kwargs):
        self.bot = bot

    async def _answer(self, name, *args, **kwargs):
        RecordingClient.calls.append((name, args, kwargs))
        if RecordingClient.error is not None:
            raise RecordingClient.error
        return {"status": 0, "status_message": "ok", "call": name}

    def set_webhook(self, url, is_inline=False):
        return self._answer("set_webhook", url, is_inline=is_inline)

    def get_account_info(self):
        return self._answer("get_account_info")

    def get_user_details(self, user_id):
        return self._answer("get_user_details", user_id)

    def get_online_status(self, user_ids):
        if len(user_ids) > 100:
            raise ArgumentError("too many ids")
        return self._answer("get_online_status", user_ids)

    def send_message(self, receiver, message_type, message_data, **kwargs):
        return self._answer("send_message", receiver, message_type, message_data, **kwargs)

    def broadcast_message(self, receivers, message_type, message_data):
        return self._answer("broadcast_message", receivers, message_type, message_data)


@pytest.fixture(autouse=True)
def cli_env(monkeypatch):
    RecordingClient.calls = []
    RecordingClient.error = None
    monkeypatch.setattr(cli_main, "ViberClient", RecordingClient)
    monkeypatch.setattr(cli_main, "setup_app_logging", lambda: None)
    monkeypatch.setattr(settings, "auth_token", "token-1")
    monkeypatch.setattr(settings, "bot_name", "Echo Bot")
    monkeypatch.setattr(settings, "bot_avatar", None)
    monkeypatch.setattr(settings, "webhook_url", None)


def test_account_info_prints_json():
    result = runner.invoke(cli_main.app, ["account-info"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)["call"] == "get_account_info"


def test_set_webhook_inline():
    result = runner.invoke(cli_main.app, ["set-webhook", "https://example.test/hook", "--inline"])

    assert result.exit_code == 0
    assert RecordingClient.calls == [
        ("set_webhook", ("https://example.test/hook",), {"is_inline": True})
    ]


def test_set_webhook_without_url_fails():
    result = runner.invoke(cli_main.app, ["set-webhook"])

    assert result.exit_code == 1
    assert RecordingClient.calls == []


def test_send_text_builds_text_message():
    result = runner.invoke(
        cli_main.app,
        ["send-text", "user-1", "Hello", "--tracking-data", '{"step": 1}'],
    )

    assert result.exit_code == 0
    name, args, kwargs = RecordingClient.calls[0]
    assert name == "send_message"
    assert args[0] == "user-1"
    assert args[1] == "text"
    assert args[2].to_message_data() == {"type": "text", "text": "Hello"}
    assert kwargs == {"tracking_data": {"step": 1}}


def test_broadcast_text_collects_receivers():
    result = runner.invoke(
        cli_main.app, ["broadcast-text", "Sale!", "--to", "user-1", "--to", "user-2"]
    )

    assert result.exit_code == 0
    assert RecordingClient.calls[0][1][0] == ["user-1", "user-2"]


def test_online_validation_error_exits_with_message():
    ids = [f"user-{i}" for i in range(101)]

    result = runner.invoke(cli_main.app, ["online", *ids])

    assert result.exit_code == 1
    assert RecordingClient.calls == []


def test_api_error_exits_non_zero():
    RecordingClient.error = ViberApiError({"status": 2, "status_message": "invalidAuthToken"})

    result = runner.invoke(cli_main.app, ["user-details", "user-1"])

    assert result.exit_code == 1


def test_missing_credentials(monkeypatch):
    monkeypatch.setattr(settings, "auth_token", None)

    result = runner.invoke(cli_main.app, ["account-info"])

    assert result.exit_code == 1
    assert RecordingClient.calls == []


def test_send_text_rejects_empty_text():
    result = runner.invoke(cli_main.app, ["send-text", "user-1", ""])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert RecordingClient.calls == []


def test_broadcast_text_rejects_empty_text():
    result = runner.invoke(cli_main.app, ["broadcast-text", "", "--to", "user-1"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert RecordingClient.calls == []


def test_send_text_rejects_malformed_tracking_data():
    result = runner.invoke(
        cli_main.app, ["send-text", "user-1", "Hello", "--tracking-data", "{bad"]
    )

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert RecordingClient.calls == []
