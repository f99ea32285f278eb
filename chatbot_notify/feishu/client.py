"""Feishu (Lark) custom bot webhook client."""

import logging
from urllib.parse import SplitResult, quote

import requests
from pydantic import ValidationError

from chatbot_notify.exceptions import ProviderError, ResponseDecodingError
from chatbot_notify.feishu.models import (
    FeishuMessage,
    FeishuSendResponse,
    FeishuTextContent,
    FeishuTextMessage,
)
from chatbot_notify.utils.config import (
    FEISHU_DEFAULT_BASE_URL,
    FeishuBotConfig,
    get_feishu_settings,
)
from chatbot_notify.webhook.base import WebhookBotClient

DEFAULT_BASE_URL = FEISHU_DEFAULT_BASE_URL

WEBHOOK_PATH = "/open-apis/bot/v2/hook/"


class FeishuBotClient(WebhookBotClient):
    """Client for sending messages through a Feishu custom bot webhook.

    The bot token is embedded in the webhook path. Only text messages are
    supported; if the bot has a keyword filter, the text must contain it.
    """

    PROVIDER = "feishu"
    DEFAULT_BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        *,
        token: str | None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialise the Feishu client.

        :param token: Bot webhook token.
        :param session: HTTP session used for requests.
        :param logger: Logger for send events.
        :param base_url: Feishu origin. Defaults to https://open.feishu.cn.
        :param timeout: Default request timeout in seconds.
        """
        super().__init__(
            credential=token,
            session=session,
            logger=logger,
            base_url=base_url,
            timeout=timeout,
        )

    @classmethod
    def from_config(
        cls,
        config: FeishuBotConfig | None = None,
        *,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> "FeishuBotClient":
        """Create a client from Feishu settings.

        :param config: Settings to use. Loaded from the environment if not provided.
        :param session: HTTP session used for requests.
        :param logger: Logger for send events.
        :returns: Configured client.
        """
        config = config or get_feishu_settings()
        return cls(
            token=config.token,
            session=session,
            logger=logger,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    @property
    def token(self) -> str:
        """Get the bot token."""
        return self._credential

    def send_text(self, text: str, *, timeout: float | None = None) -> None:
        """Send a text message.

        :param text: Message text.
        :param timeout: Request timeout in seconds. Defaults to the client timeout.
        :raises BotClientError: If the message could not be delivered.
        """
        self._logger.info(f"Sending feishu text message: text={text}")
        self._deliver(
            FeishuTextMessage(content=FeishuTextContent(text=text)),
            timeout=timeout,
        )

    def send(self, message: FeishuMessage, *, timeout: float | None = None) -> None:
        """Send a pre-built message.

        :param message: Feishu message envelope.
        :param timeout: Request timeout in seconds. Defaults to the client timeout.
        :raises BotClientError: If the message could not be delivered.
        """
        self._logger.info(f"Sending feishu message: msg_type={message.msg_type}")
        self._deliver(message, timeout=timeout)

    def _build_url(self, base: SplitResult) -> str:
        path = base.path.rstrip("/") + WEBHOOK_PATH + quote(self._credential, safe="")
        return base._replace(path=path).geturl()

    def _check_response(self, body: bytes) -> None:
        try:
            data = FeishuSendResponse.model_validate_json(body)
        except ValidationError as e:
            self._logger.error(f"Failed to decode feishu response: err={e}, body={body!r}")
            raise ResponseDecodingError(f"Failed to decode feishu response: {e}") from e

        if data.code != 0:
            self._logger.error(f"Feishu webhook returned error: code={data.code}, msg={data.msg}")
            raise ProviderError(self.PROVIDER, data.code, data.msg)
