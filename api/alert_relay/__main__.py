"""
Run the relay with Uvicorn.

Usage:
    python -m alert_relay
    OR
    alert-relay
    OR
    uvicorn alert_relay.main:create_app --factory --port 3000
"""

import uvicorn

from alert_relay.config import load_settings
from alert_relay.logging_config import setup_logging
from alert_relay.main import create_app


def run() -> None:
    # Handlers first so config warnings are formatted; LOG_LEVEL applied once known.
    setup_logging()
    settings = load_settings()
    setup_logging(settings.log_level)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
