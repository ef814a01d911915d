"""Message formatting for inbound alert payloads."""

from alert_relay.formatters.fields import field
from alert_relay.formatters.format_value import format_value
from alert_relay.formatters.templates import (
    TEST_MESSAGE,
    AlertKind,
    format_alert,
    format_generic,
    format_mt5,
    format_tradingview,
    generic_text,
)

__all__ = [
    "TEST_MESSAGE",
    "AlertKind",
    "field",
    "format_alert",
    "format_generic",
    "format_mt5",
    "format_tradingview",
    "format_value",
    "generic_text",
]
