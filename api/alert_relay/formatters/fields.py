from collections.abc import Mapping
from typing import Any

from alert_relay.formatters.format_value import format_value


def is_present(val: Any) -> bool:
    # Same notion of "absent" alert tools rely on: missing, null, "", 0, false.
    # Empty lists and objects still count as present.
    if val is None or val is False:
        return False
    if isinstance(val, str):
        return len(val) > 0
    if isinstance(val, (int, float)):
        return val != 0
    return True


def field(payload: Any, *keys: str, default: str) -> str:
    """
    Return the first present value among ``keys`` rendered as text, else ``default``.

    ``payload`` may be anything a webhook body decodes to; non-mappings
    behave like an empty mapping.
    """
    if not isinstance(payload, Mapping):
        return default
    for key in keys:
        val = payload.get(key)
        if is_present(val):
            return format_value(val)
    return default
