import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from alert_relay.auth import require_webhook_secret
from alert_relay.config import Settings
from alert_relay.deps import get_notifier, get_settings
from alert_relay.formatters import AlertKind, format_alert
from alert_relay.notifier import Notifier
from alert_relay.payload import preview, read_payload
from alert_relay.schemas import ErrorResponse, SendResult

wh_logger = logging.getLogger("webhooks")

router = APIRouter(prefix="/webhook", tags=["webhooks"])

_RESPONSES = {
    401: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


async def _relay(kind: AlertKind, payload: Any, notifier: Notifier) -> SendResult:
    text = format_alert(kind, payload)
    await notifier.send(text)
    return SendResult()


@router.post(
    "/tradingview",
    response_model=SendResult,
    response_model_exclude_none=True,
    responses=_RESPONSES,
    summary="Receive a TradingView alert",
)
async def tradingview_webhook(
    request: Request,
    settings: Settings = Depends(get_settings),
    notifier: Notifier = Depends(get_notifier),
):
    payload = await read_payload(request)
    wh_logger.info("TradingView webhook received: %s", preview(payload))

    require_webhook_secret(payload, settings.webhook_secret)
    return await _relay(AlertKind.TRADINGVIEW, payload, notifier)


@router.post(
    "/mt5",
    response_model=SendResult,
    response_model_exclude_none=True,
    responses=_RESPONSES,
    summary="Receive a MetaTrader 5 alert",
)
async def mt5_webhook(request: Request, notifier: Notifier = Depends(get_notifier)):
    payload = await read_payload(request)
    wh_logger.info("MT5 webhook received: %s", preview(payload))

    return await _relay(AlertKind.MT5, payload, notifier)


@router.post(
    "",
    response_model=SendResult,
    response_model_exclude_none=True,
    responses=_RESPONSES,
    summary="Receive an alert in any format",
)
async def generic_webhook(request: Request, notifier: Notifier = Depends(get_notifier)):
    payload = await read_payload(request)
    wh_logger.info("Generic webhook received: %s", preview(payload))

    return await _relay(AlertKind.GENERIC, payload, notifier)
