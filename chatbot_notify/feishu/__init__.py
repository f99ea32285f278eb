"""Feishu (Lark) custom bot webhook integration."""

from chatbot_notify.feishu.client import FeishuBotClient
from chatbot_notify.feishu.models import (
    FeishuMessage,
    FeishuSendResponse,
    FeishuTextContent,
    FeishuTextMessage,
)

__all__ = [
    "FeishuBotClient",
    "FeishuMessage",
    "FeishuSendResponse",
    "FeishuTextContent",
    "FeishuTextMessage",
]
