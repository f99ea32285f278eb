"""WeCom (WeChat Work) group bot webhook client."""

import logging
from urllib.parse import SplitResult, parse_qsl, urlencode

import requests
from pydantic import ValidationError

from chatbot_notify.exceptions import ProviderError, ResponseDecodingError
from chatbot_notify.utils.config import (
    WECOM_DEFAULT_BASE_URL,
    WeComBotConfig,
    get_wecom_settings,
)
from chatbot_notify.webhook.base import WebhookBotClient
from chatbot_notify.wecom.models import (
    WeComMarkdownContent,
    WeComMarkdownMessage,
    WeComMessage,
    WeComSendResponse,
    WeComTextContent,
    WeComTextMessage,
)

DEFAULT_BASE_URL = WECOM_DEFAULT_BASE_URL

WEBHOOK_PATH = "/cgi-bin/webhook/send"


class WeComBotClient(WebhookBotClient):
    """Client for sending messages through a WeCom group bot webhook.

    The bot key is passed as the ``key`` query parameter. Supports text
    messages (with optional mentions) and markdown messages.
    """

    PROVIDER = "wecom"
    CREDENTIAL_NAME = "key"
    DEFAULT_BASE_URL = DEFAULT_BASE_URL

    def __init__(
        self,
        *,
        key: str | None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialise the WeCom client.

        :param key: Bot webhook key.
        :param session: HTTP session used for requests.
        :param logger: Logger for send events.
        :param base_url: WeCom origin. Defaults to https://qyapi.weixin.qq.com.
        :param timeout: Default request timeout in seconds.
        """
        super().__init__(
            credential=key,
            session=session,
            logger=logger,
            base_url=base_url,
            timeout=timeout,
        )

    @classmethod
    def from_config(
        cls,
        config: WeComBotConfig | None = None,
        *,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
    ) -> "WeComBotClient":
        """Create a client from WeCom settings.

        :param config: Settings to use. Loaded from the environment if not provided.
        :param session: HTTP session used for requests.
        :param logger: Logger for send events.
        :returns: Configured client.
        """
        config = config or get_wecom_settings()
        return cls(
            key=config.key,
            session=session,
            logger=logger,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    @property
    def key(self) -> str:
        """Get the bot key."""
        return self._credential

    def send_text(
        self,
        content: str,
        *,
        mentioned_list: list[str] | None = None,
        mentioned_mobile_list: list[str] | None = None,
        timeout: float | None = None,
    ) -> None:
        """Send a text message.

        :param content: Message text.
        :param mentioned_list: User IDs to mention. Use '@all' for everyone.
        :param mentioned_mobile_list: Mobile numbers to mention.
        :param timeout: Request timeout in seconds. Defaults to the client timeout.
        :raises BotClientError: If the message could not be delivered.
        """
        self._logger.info(f"Sending wecom text message: content={content}")
        message = WeComTextMessage(
            text=WeComTextContent(
                content=content,
                mentioned_list=mentioned_list,
                mentioned_mobile_list=mentioned_mobile_list,
            )
        )
        self._deliver(message, timeout=timeout)

    def send_markdown(self, content: str, *, timeout: float | None = None) -> None:
        """Send a markdown message.

        :param content: Markdown content.
        :param timeout: Request timeout in seconds. Defaults to the client timeout.
        :raises BotClientError: If the message could not be delivered.
        """
        self._logger.info(f"Sending wecom markdown message: content={content}")
        self._deliver(
            WeComMarkdownMessage(markdown=WeComMarkdownContent(content=content)),
            timeout=timeout,
        )

    def send(self, message: WeComMessage, *, timeout: float | None = None) -> None:
        """Send a pre-built message.

        :param message: WeCom message envelope.
        :param timeout: Request timeout in seconds. Defaults to the client timeout.
        :raises BotClientError: If the message could not be delivered.
        """
        self._logger.info(f"Sending wecom message: msgtype={message.msgtype}")
        self._deliver(message, timeout=timeout)

    def _build_url(self, base: SplitResult) -> str:
        path = base.path.rstrip("/") + WEBHOOK_PATH
        query = [
            (name, value)
            for name, value in parse_qsl(base.query, keep_blank_values=True)
            if name != "key"
        ]
        query.append(("key", self._credential))
        return base._replace(path=path, query=urlencode(query)).geturl()

    def _check_response(self, body: bytes) -> None:
        try:
            data = WeComSendResponse.model_validate_json(body)
        except ValidationError as e:
            self._logger.error(f"Failed to decode wecom response: err={e}, body={body!r}")
            raise ResponseDecodingError(f"Failed to decode wecom response: {e}") from e

        if data.errcode != 0:
            self._logger.error(
                f"WeCom webhook returned error: errcode={data.errcode}, errmsg={data.errmsg}"
            )
            raise ProviderError(self.PROVIDER, data.errcode, data.errmsg)
