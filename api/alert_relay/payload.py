"""Decode inbound webhook bodies regardless of how the alert tool sent them."""

import json
import logging
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_payload(request: Request) -> Any:
    """
    Parse the request body: JSON first, then form-encoded, then raw text.

    Returns whatever the JSON decodes to (mapping, list, string, number), a
    dict of string form fields, or the raw body as a string. An empty body
    becomes an empty dict.
    """
    raw = await request.body()
    if not raw.strip():
        return {}

    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        pass

    content_type = request.headers.get("content-type", "")
    if any(t in content_type for t in _FORM_TYPES):
        try:
            form = await request.form()
            return {k: v for k, v in form.items() if isinstance(v, str)}
        except Exception:
            logger.debug("Could not decode form body, falling back to text", exc_info=True)

    return text


def preview(payload: Any, limit: int = 500) -> str:
    text = payload if isinstance(payload, str) else json.dumps(payload, default=str, ensure_ascii=False)
    return f"{text[:limit]}..." if len(text) > limit else text
