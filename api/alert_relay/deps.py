from fastapi import Request

from alert_relay.config import Settings
from alert_relay.notifier import Notifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> Notifier:
    return request.app.state.notifier
