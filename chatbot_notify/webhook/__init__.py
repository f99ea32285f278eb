"""Shared webhook transport for chat-bot clients."""

from chatbot_notify.webhook.base import DEFAULT_REQUEST_TIMEOUT, WebhookBotClient

__all__ = [
    "DEFAULT_REQUEST_TIMEOUT",
    "WebhookBotClient",
]
