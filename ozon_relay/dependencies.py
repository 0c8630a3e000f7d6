"""FastAPI dependencies for objects built once at application startup."""

from fastapi import Request

from ozon_relay.config import Settings
from ozon_relay.notifiers import BaseNotifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> BaseNotifier:
    return request.app.state.notifier
