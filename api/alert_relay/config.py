import logging

from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # Telegram Bot API
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""
    telegram_api_url: str = "https://api.telegram.org"
    telegram_timeout: float = 15

    # Shared secret for /webhook/tradingview (empty = no check)
    webhook_secret: str = ""

    app_name: str = "Super Alert Server"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Inbound request body cap (bytes)
    max_body_size: int = 1024 * 1024

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}

    @property
    def telegram_configured(self) -> bool:
        return bool(self.telegram_bot_token and self.telegram_chat_id)


def load_settings() -> Settings:
    """Read settings from the environment once, at startup."""
    settings = Settings()
    if not settings.telegram_configured:
        logger.warning(
            "TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID is not set; "
            "alerts will be rejected until both are configured."
        )
    return settings
