"""
Render a single payload value for a notification line.

Alert tools send mostly strings and numbers, but nothing stops a template
from putting a nested object or a list into ``message`` or ``price``.
Those get a readable rendering instead of a Python repr.

Priority order for display-name extraction from a dict:
  name > title > label > symbol > text > message > id
"""

import json
from typing import Any

DISPLAY_KEYS = (
    "name",
    "title",
    "label",
    "symbol",
    "text",
    "message",
    "id",
)


def format_value(val: Any, max_len: int = 300) -> str:
    """
    Format a single value into a human-readable string.

    - ``None`` renders as an empty string, booleans as ``true``/``false``.
    - Other primitives are returned via ``str(val)``.
    - Lists of primitives are joined with ", ".
    - Dicts are inspected for well-known display keys; if found we return that.
    - Otherwise we return compact JSON (truncated to *max_len* chars).
    """
    if val is None:
        return ""

    if isinstance(val, bool):
        return "true" if val else "false"

    # 64000.0 -> "64000", as JSON number rendering does
    if isinstance(val, float) and val.is_integer():
        return str(int(val))

    if not isinstance(val, (dict, list)):
        return str(val)

    if isinstance(val, list):
        if len(val) == 0:
            return ""
        if all(not isinstance(v, (dict, list)) for v in val):
            return ", ".join(format_value(v) for v in val)
        items = [format_value(v, 80) for v in val]
        joined = ", ".join(items)
        return f"{joined[:max_len]}..." if len(joined) > max_len else joined

    for key in DISPLAY_KEYS:
        if key in val and val[key] is not None and not isinstance(val[key], (dict, list)):
            return format_value(val[key])

    try:
        dumped = json.dumps(val, default=str, ensure_ascii=False)
        return f"{dumped[:max_len]}..." if len(dumped) > max_len else dumped
    except (TypeError, ValueError):
        return "[complex value]"
