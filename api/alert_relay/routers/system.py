import logging

from fastapi import APIRouter, Depends

from alert_relay.config import Settings
from alert_relay.deps import get_notifier, get_settings
from alert_relay.formatters import TEST_MESSAGE
from alert_relay.notifier import Notifier
from alert_relay.response import error_response
from alert_relay.schemas import ErrorResponse, HealthStatus, SendResult, ServiceStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["system"])


@router.get("/", response_model=ServiceStatus, summary="Service descriptor")
async def root(settings: Settings = Depends(get_settings)):
    return ServiceStatus(message=f"{settings.app_name} is running!")


@router.get("/health", response_model=HealthStatus, summary="Health check")
async def health():
    return HealthStatus()


@router.get(
    "/test",
    response_model=SendResult,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="Send a self-test message",
)
async def send_test_message(
    settings: Settings = Depends(get_settings),
    notifier: Notifier = Depends(get_notifier),
):
    if not settings.telegram_configured:
        logger.warning("Self-test requested without Telegram configuration")
        return error_response(500, "Missing TELEGRAM_BOT_TOKEN or TELEGRAM_CHAT_ID")

    await notifier.send(TEST_MESSAGE)
    return SendResult(message="Test message sent to Telegram!")
