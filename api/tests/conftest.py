import json
from datetime import datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from alert_relay.config import Settings
from alert_relay.main import create_app
from alert_relay.notifier import NotificationDeliveryError, Notifier, TelegramNotifier

ENV_VARS = (
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "WEBHOOK_SECRET",
    "PORT",
    "HOST",
    "LOG_LEVEL",
    "TELEGRAM_API_URL",
    "TELEGRAM_TIMEOUT",
    "MAX_BODY_SIZE",
)

FIXED_NOW = datetime(2026, 1, 2, 3, 4, 5)


class FakeNotifier(Notifier):
    """Records every message; raises ``error`` instead of sending when set."""

    def __init__(self, error: Exception = None):
        self.sent = []
        self.error = error

    @property
    def configured(self) -> bool:
        return True

    async def send(self, text: str) -> dict:
        self.sent.append(text)
        if self.error is not None:
            raise self.error
        return {"ok": True, "result": {"message_id": len(self.sent)}}


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps the decoded JSON body of every request."""

    def __init__(self, status_code: int = 200, body=None, text: str = None):
        self.requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if text is not None:
                return httpx.Response(status_code, text=text)
            return httpx.Response(status_code, json=body if body is not None else {"ok": True, "result": {}})

        super().__init__(handler)

    @property
    def sent_bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_settings():
    def _make(**overrides) -> Settings:
        values = {"telegram_bot_token": "123:abc", "telegram_chat_id": "-10042"}
        values.update(overrides)
        return Settings(_env_file=None, **values)

    return _make


@pytest.fixture
def fake_notifier():
    return FakeNotifier()


@pytest.fixture
def make_client(make_settings):
    def _make(settings: Settings = None, notifier: Notifier = None) -> TestClient:
        return TestClient(create_app(settings or make_settings(), notifier=notifier or FakeNotifier()))

    return _make


@pytest.fixture
def telegram_notifier_with(make_settings):
    """Build a real TelegramNotifier whose HTTP traffic goes to a RecordingTransport."""

    def _make(transport: RecordingTransport, settings: Settings = None) -> TelegramNotifier:
        return TelegramNotifier.from_settings(settings or make_settings(), transport=transport)

    return _make


def failing_notifier(message: str = "Bad Request: chat not found") -> FakeNotifier:
    return FakeNotifier(error=NotificationDeliveryError(message, status_code=400))
