"""Shared fixtures for the relay test suite.

Settings are loaded at import time and refuse to start without a webhook URL,
so a dummy one is set before any ozon_relay module is imported.
"""

from __future__ import annotations

import os

os.environ.setdefault("FEISHU_WEBHOOK_URL", "https://open.feishu.cn/open-apis/bot/v2/hook/test-token")

import pytest
from fastapi.testclient import TestClient

from ozon_relay.errors import NotificationError
from ozon_relay.main import create_app
from ozon_relay.notifiers import BaseNotifier


class RecordingNotifier(BaseNotifier):
    """Collects every message instead of posting it; optionally fails each one."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: list[str] = []

    @property
    def channel_name(self) -> str:
        return "recording"

    async def notify(self, text: str) -> None:
        self.sent.append(text)
        if self.fail:
            raise NotificationError("Feishu webhook unreachable: connection refused")


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def failing_notifier() -> RecordingNotifier:
    return RecordingNotifier(fail=True)


@pytest.fixture
def client(notifier):
    """TestClient whose downstream notifications land in `notifier.sent`."""
    with TestClient(create_app(notifier=notifier)) as c:
        yield c


@pytest.fixture
def failing_client(failing_notifier):
    with TestClient(create_app(notifier=failing_notifier)) as c:
        yield c
