"""Outbound delivery of formatted alerts to the Telegram Bot API."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from alert_relay.config import Settings

logger = logging.getLogger(__name__)


class NotificationError(Exception):
    """Base error for a failed delivery. ``message`` is returned to the HTTP caller."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotifierNotConfigured(NotificationError):
    pass


class NotificationDeliveryError(NotificationError):
    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class Notifier(ABC):
    """
    Common interface for message senders.
    The router only ever awaits ``send()`` and maps errors to HTTP responses.
    """

    @property
    @abstractmethod
    def configured(self) -> bool:
        ...

    @abstractmethod
    async def send(self, text: str) -> dict[str, Any]:
        """Deliver one message. Returns the provider's JSON reply or raises NotificationError."""
        ...


class TelegramNotifier(Notifier):
    """Send HTML-formatted messages to a single chat via ``sendMessage``."""

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        api_url: str = "https://api.telegram.org",
        timeout: float = 15,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.bot_token = bot_token
        self.chat_id = chat_id
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "TelegramNotifier":
        return cls(
            bot_token=settings.telegram_bot_token,
            chat_id=settings.telegram_chat_id,
            api_url=settings.telegram_api_url,
            timeout=settings.telegram_timeout,
            **kwargs,
        )

    @property
    def configured(self) -> bool:
        return bool(self.bot_token and self.chat_id)

    @property
    def endpoint(self) -> str:
        return f"{self.api_url}/bot{self.bot_token}/sendMessage"

    async def send(self, text: str) -> dict[str, Any]:
        if not self.configured:
            raise NotifierNotConfigured("Missing TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID")

        body = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "HTML",
        }

        # A fresh client per call; connections are not pooled between alerts.
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.endpoint, json=body)
        except httpx.HTTPError as exc:
            reason = str(exc) or exc.__class__.__name__
            logger.error("Telegram request failed: %s", reason)
            raise NotificationDeliveryError(reason) from exc

        if resp.status_code != 200:
            logger.error("Telegram error %s: %s", resp.status_code, resp.text)
            raise NotificationDeliveryError(resp.text, status_code=resp.status_code)

        try:
            result = resp.json()
        except ValueError as exc:
            logger.error("Telegram returned a non-JSON body: %s", resp.text[:200])
            raise NotificationDeliveryError(resp.text, status_code=resp.status_code) from exc

        logger.info("Telegram message sent to chat %s", self.chat_id)
        return result
