"""Feishu custom bot webhook notifier."""

import logging

import httpx

from ozon_relay.errors import NotificationError, parse_feishu_error
from .base import BaseNotifier


logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class FeishuNotifier(BaseNotifier):
    """Posts text messages to a single Feishu bot webhook.

    One attempt per message, no retry. The webhook URL embeds the bot token,
    so no auth headers are sent.
    """

    def __init__(
        self,
        webhook_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self._transport = transport

    @property
    def channel_name(self) -> str:
        return "feishu"

    async def notify(self, text: str) -> None:
        payload = {
            "msg_type": "text",
            "content": {"text": text},
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.webhook_url, json=payload)
        except httpx.TimeoutException as e:
            logger.error(f"Failed to send message to Feishu: timed out after {self.timeout}s")
            raise NotificationError(f"Feishu webhook timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            logger.error(f"Failed to send message to Feishu: {e}")
            raise NotificationError(f"Feishu webhook unreachable: {e}") from e

        if not response.is_success:
            reason = parse_feishu_error(response.text)
            logger.error(f"Failed to send message to Feishu: HTTP {response.status_code}: {reason}")
            raise NotificationError(f"Feishu webhook error {response.status_code}: {reason}")

        # Feishu reports bot-level rejections (bad keyword, rate limit) with HTTP 200
        try:
            data = response.json()
        except ValueError:
            data = None
        if isinstance(data, dict) and data.get("code") not in (None, 0):
            reason = parse_feishu_error(response.text)
            logger.error(f"Feishu rejected message: {reason}")
            raise NotificationError(f"Feishu rejected message: {reason}")

        logger.info("Message sent to Feishu")
