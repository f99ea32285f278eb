"""Configuration for the webhook bot clients using pydantic-settings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

FEISHU_DEFAULT_BASE_URL = "https://open.feishu.cn"
WECOM_DEFAULT_BASE_URL = "https://qyapi.weixin.qq.com"


class FeishuBotConfig(BaseSettings):
    """Configuration for the Feishu bot client.

    All settings are loaded from environment variables with the FEISHU_BOT_ prefix.

    :param token: Bot webhook token. Sends fail when empty.
    :param base_url: Feishu origin.
    :param timeout: Request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="FEISHU_BOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token: str = Field(default="", description="Bot webhook token")
    base_url: str = Field(
        default=FEISHU_DEFAULT_BASE_URL,
        description="Feishu API origin",
    )
    timeout: float = Field(
        default=30,
        ge=1,
        le=120,
        description="Request timeout in seconds",
    )


class WeComBotConfig(BaseSettings):
    """Configuration for the WeCom bot client.

    All settings are loaded from environment variables with the WECOM_BOT_ prefix.

    :param key: Bot webhook key. Sends fail when empty.
    :param base_url: WeCom origin.
    :param timeout: Request timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="WECOM_BOT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    key: str = Field(default="", description="Bot webhook key")
    base_url: str = Field(
        default=WECOM_DEFAULT_BASE_URL,
        description="WeCom API origin",
    )
    timeout: float = Field(
        default=30,
        ge=1,
        le=120,
        description="Request timeout in seconds",
    )


@lru_cache
def get_feishu_settings() -> FeishuBotConfig:
    """Get cached Feishu settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured FeishuBotConfig instance.
    """
    return FeishuBotConfig()


@lru_cache
def get_wecom_settings() -> WeComBotConfig:
    """Get cached WeCom settings.

    Settings are loaded once and cached for the lifetime of the process.

    :returns: Configured WeComBotConfig instance.
    """
    return WeComBotConfig()
