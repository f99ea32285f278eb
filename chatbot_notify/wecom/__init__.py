"""WeCom (WeChat Work) group bot webhook integration."""

from chatbot_notify.wecom.client import WeComBotClient
from chatbot_notify.wecom.models import (
    MENTION_ALL,
    WeComMarkdownContent,
    WeComMarkdownMessage,
    WeComMessage,
    WeComSendResponse,
    WeComTextContent,
    WeComTextMessage,
)

__all__ = [
    "MENTION_ALL",
    "WeComBotClient",
    "WeComMarkdownContent",
    "WeComMarkdownMessage",
    "WeComMessage",
    "WeComSendResponse",
    "WeComTextContent",
    "WeComTextMessage",
]
