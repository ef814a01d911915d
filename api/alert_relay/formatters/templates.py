"""Telegram HTML templates for each inbound alert shape."""

import enum
import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Callable, Optional

from alert_relay.formatters.fields import is_present, field
from alert_relay.formatters.format_value import format_value

TIME_FORMAT = "%H:%M:%S %d/%m/%Y"

TEST_MESSAGE = "🧪 <b>TEST MESSAGE</b>\n\nServer is working correctly! ✅"


class AlertKind(str, enum.Enum):
    GENERIC = "generic"
    TRADINGVIEW = "tradingview"
    MT5 = "mt5"


def local_timestamp(now: Optional[Callable[[], datetime]] = None) -> str:
    return (now or datetime.now)().strftime(TIME_FORMAT)


def _price_block(header: str, symbol: str, price: str, message: str, time: str) -> str:
    return (
        f"{header}\n"
        f"\n"
        f"📊 <b>Symbol:</b> {symbol}\n"
        f"💰 <b>Price:</b> {price}\n"
        f"📝 <b>Message:</b> {message}\n"
        f"🕐 <b>Time:</b> {time}"
    )


def format_tradingview(payload: Any, now: Optional[Callable[[], datetime]] = None) -> str:
    return _price_block(
        "🔔 <b>TRADINGVIEW ALERT</b>",
        symbol=field(payload, "symbol", default="Unknown"),
        price=field(payload, "price", default="N/A"),
        message=field(payload, "message", "text", default="Alert!"),
        time=field(payload, "time", default="") or local_timestamp(now),
    )


def format_mt5(payload: Any, now: Optional[Callable[[], datetime]] = None) -> str:
    # MT5 EAs do not send a usable timestamp; always stamp with receive time.
    return _price_block(
        "🚨 <b>MT5 ALERT</b>",
        symbol=field(payload, "symbol", default="Unknown"),
        price=field(payload, "price", default="N/A"),
        message=field(payload, "message", default="MT5 Alert!"),
        time=local_timestamp(now),
    )


def generic_text(payload: Any) -> str:
    """
    Pick the text of a generic alert.

    A string body is used as-is, a mapping contributes its ``message`` or
    ``text`` field, anything else is pretty-printed as JSON.
    """
    if isinstance(payload, str):
        return payload
    if isinstance(payload, Mapping):
        for key in ("message", "text"):
            if is_present(payload.get(key)):
                return format_value(payload[key])
    return json.dumps(payload, indent=2, ensure_ascii=False, default=str)


def format_generic(payload: Any, now: Optional[Callable[[], datetime]] = None) -> str:
    return f"📨 <b>ALERT</b>\n\n{generic_text(payload)}"


_FORMATTERS = {
    AlertKind.GENERIC: format_generic,
    AlertKind.TRADINGVIEW: format_tradingview,
    AlertKind.MT5: format_mt5,
}


def format_alert(kind: AlertKind, payload: Any, now: Optional[Callable[[], datetime]] = None) -> str:
    """Render ``payload`` with the template for ``kind``. Never raises on payload shape."""
    return _FORMATTERS[AlertKind(kind)](payload, now=now)
