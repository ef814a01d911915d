import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from alert_relay.config import Settings, load_settings
from alert_relay.logging_config import setup_logging
from alert_relay.middleware import RequestSizeLimitMiddleware, SecurityHeadersMiddleware
from alert_relay.notifier import NotificationError, Notifier, TelegramNotifier
from alert_relay.response import error_response
from alert_relay.routers import system, webhooks

API_VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def startup_banner(settings: Settings) -> str:
    def flag(value: str, on: str = "✅ Configured", off: str = "❌ Missing") -> str:
        return on if value else off

    rows = [
        f"🚀 {settings.app_name} Started!",
        f"Port: {settings.port}",
        f"Telegram Bot: {flag(settings.telegram_bot_token)}",
        f"Chat ID: {flag(settings.telegram_chat_id)}",
        f"Webhook Secret: {flag(settings.webhook_secret, on='✅ Enabled', off='⚪ Disabled')}",
    ]
    width = max(len(r) for r in rows) + 2
    border = "═" * width
    body = "\n".join(f"║ {r.ljust(width - 2)} ║" for r in rows)
    return f"╔{border}╗\n{body}\n╚{border}╝"


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(app.state.settings.log_level)
    logger.info("\n%s", startup_banner(app.state.settings))
    yield


def create_app(settings: Optional[Settings] = None, notifier: Optional[Notifier] = None) -> FastAPI:
    """
    Build the relay app around one immutable ``Settings`` value.

    ``notifier`` defaults to a TelegramNotifier built from the same settings.
    """
    if settings is None:
        settings = load_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Relay trading alert webhooks to a Telegram chat.",
        version=API_VERSION,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings
    app.state.notifier = notifier if notifier is not None else TelegramNotifier.from_settings(settings)

    app.add_middleware(RequestSizeLimitMiddleware, max_body_size=settings.max_body_size)
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Exception Handlers ---

    @app.exception_handler(NotificationError)
    async def notification_error_handler(request: Request, exc: NotificationError):
        logger.error("Alert delivery failed for %s: %s", request.url.path, exc.message)
        return error_response(500, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    # --- Routes ---

    app.include_router(system.router)
    app.include_router(webhooks.router)

    return app
