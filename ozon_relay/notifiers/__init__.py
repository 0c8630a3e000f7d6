"""
Notification Channels

Downstream chat webhooks that event summaries are relayed to.
"""

from .base import BaseNotifier
from .feishu import FeishuNotifier

__all__ = ["BaseNotifier", "FeishuNotifier"]
