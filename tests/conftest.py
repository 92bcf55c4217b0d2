"""
Pytest configuration and common fixtures for Vibera tests.

Provides a fake aiohttp session recording every POST, a bot identity and a
client wired to both.
"""

from typing import Any

import pytest

from vibera.messaging.viber.client.viber_client import ViberClient
from vibera.messaging.viber.models.basic_models import BotConfiguration

TEST_API_URL = "https://chatapi.example.test/pa"
TEST_AUTH_TOKEN = "445da6az1s345z78-dazcczb2542zv51a-e0vc5fva17480im9"


class FakeResponse:
    """Stand-in for aiohttp.ClientResponse used as an async context manager."""

    def __init__(self, payload: Any, status: int = 200):
        self.payload = payload
        self.status = status

    async def json(self, content_type: str | None = "application/json") -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeSession:
    """Records POST calls and answers with a canned body or raises a transport error."""

    def __init__(self, payload: Any = None, error: Exception | None = None):
        self.payload = {"status": 0, "status_message": "ok"} if payload is None else payload
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return FakeResponse(self.payload)

    @property
    def last_body(self) -> dict[str, Any]:
        return self.calls[-1]["json"]

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True
        return False


@pytest.fixture
def bot() -> BotConfiguration:
    return BotConfiguration(
        name="Echo Bot",
        avatar="https://example.test/avatar.jpg",
        auth_token=TEST_AUTH_TOKEN,
    )


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def client(bot: BotConfiguration, fake_session: FakeSession) -> ViberClient:
    return ViberClient(
        bot,
        api_url=TEST_API_URL,
        session=fake_session,
        version="1.2.3",
    )


@pytest.fixture
def make_client(bot: BotConfiguration):
    """Factory for a client whose session answers with ``payload`` or raises ``error``."""

    def _make(
        payload: Any = None, error: Exception | None = None, **kwargs: Any
    ) -> tuple[ViberClient, FakeSession]:
        session = FakeSession(payload, error)
        kwargs.setdefault("api_url", TEST_API_URL)
        kwargs.setdefault("version", "1.2.3")
        return ViberClient(bot, session=session, **kwargs), session

    return _make


@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch):
    """Keep environment credentials out of the tests."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("VIBER_AUTH_TOKEN", raising=False)
    monkeypatch.delenv("VIBER_BOT_NAME", raising=False)
