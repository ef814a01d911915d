import logging
import secrets
from collections.abc import Mapping
from typing import Any

from fastapi import HTTPException

logger = logging.getLogger(__name__)


def secret_matches(payload: Any, expected: str) -> bool:
    """Constant-time check of the ``secret`` field carried in the alert body."""
    if not isinstance(payload, Mapping):
        return False
    supplied = payload.get("secret")
    if not isinstance(supplied, str):
        return False
    return secrets.compare_digest(supplied.encode(), expected.encode())


def require_webhook_secret(payload: Any, expected: str) -> None:
    """
    Reject the request with 401 unless the body carries the configured secret.
    An empty ``expected`` disables the check entirely.
    """
    if not expected:
        return
    if not secret_matches(payload, expected):
        logger.warning("Invalid webhook secret")
        raise HTTPException(status_code=401, detail="Invalid secret")
