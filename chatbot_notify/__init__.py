"""Feishu and WeCom chat-bot webhook clients.

Both clients raise the exceptions in :mod:`chatbot_notify.exceptions`.
"""

from chatbot_notify.exceptions import (
    BotClientError,
    MissingCredentialError,
    PayloadEncodingError,
    ProviderError,
    ResponseDecodingError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
    WebhookTransportError,
    WebhookURLError,
)
from chatbot_notify.feishu import FeishuBotClient
from chatbot_notify.wecom import WeComBotClient

__all__ = [
    "BotClientError",
    "FeishuBotClient",
    "MissingCredentialError",
    "PayloadEncodingError",
    "ProviderError",
    "ResponseDecodingError",
    "UnexpectedContentTypeError",
    "UnexpectedStatusError",
    "WeComBotClient",
    "WebhookTransportError",
    "WebhookURLError",
]
