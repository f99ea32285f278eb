"""Configuration and logging helpers."""

from chatbot_notify.utils.config import (
    FeishuBotConfig,
    WeComBotConfig,
    get_feishu_settings,
    get_wecom_settings,
)
from chatbot_notify.utils.logging import configure_logging

__all__ = [
    "FeishuBotConfig",
    "WeComBotConfig",
    "configure_logging",
    "get_feishu_settings",
    "get_wecom_settings",
]
