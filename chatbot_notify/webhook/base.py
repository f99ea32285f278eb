"""Shared request/response handling for webhook bot clients.

Each provider client supplies its webhook URL and response envelope; the
transport and the HTTP-level response checks live here.
"""

import logging
from abc import ABC, abstractmethod
from urllib.parse import SplitResult, urlsplit

import requests
from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from chatbot_notify.exceptions import (
    MissingCredentialError,
    PayloadEncodingError,
    UnexpectedContentTypeError,
    UnexpectedStatusError,
    WebhookTransportError,
    WebhookURLError,
)

# Default webhook request timeout in seconds
DEFAULT_REQUEST_TIMEOUT = 30

JSON_CONTENT_TYPE = "application/json"


class WebhookBotClient(ABC):
    """Base class for chat-bot webhook clients.

    A client is configured once and reused for any number of independent
    sends. Configuration is read-only after construction.
    """

    PROVIDER: str = ""
    CREDENTIAL_NAME: str = "token"
    DEFAULT_BASE_URL: str = ""

    def __init__(
        self,
        *,
        credential: str | None,
        session: requests.Session | None = None,
        logger: logging.Logger | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialise the client.

        :param credential: Bot token or key. May be empty; sends then fail.
        :param session: HTTP session used for requests. Defaults to a new session.
        :param logger: Logger for send events. Defaults to the module logger.
        :param base_url: Webhook origin. Defaults to the provider origin.
        :param timeout: Default request timeout in seconds.
        """
        self._credential = credential or ""
        self._session = session or requests.Session()
        self._logger = logger or logging.getLogger(type(self).__module__)
        self._base_url = base_url or self.DEFAULT_BASE_URL
        self._timeout = timeout or DEFAULT_REQUEST_TIMEOUT

    @property
    def session(self) -> requests.Session:
        """Get the HTTP session."""
        return self._session

    @property
    def logger(self) -> logging.Logger:
        """Get the logger."""
        return self._logger

    @property
    def base_url(self) -> str:
        """Get the webhook origin."""
        return self._base_url

    @property
    def timeout(self) -> float:
        """Get the default request timeout in seconds."""
        return self._timeout

    @abstractmethod
    def _build_url(self, base: SplitResult) -> str:
        """Build the webhook URL for this provider.

        :param base: Parsed base URL.
        :returns: Full webhook URL including the credential.
        """
        ...

    @abstractmethod
    def _check_response(self, body: bytes) -> None:
        """Decode the provider envelope and check its status field.

        :param body: Raw JSON response body.
        :raises ResponseDecodingError: If the body does not match the envelope.
        :raises ProviderError: If the provider status is not success.
        """
        ...

    def _webhook_url(self) -> str:
        try:
            base = urlsplit(self._base_url)
        except ValueError as e:
            self._logger.error(f"Failed to parse base URL: base_url={self._base_url}, err={e}")
            raise WebhookURLError(f"Invalid base URL {self._base_url!r}: {e}") from e

        if not base.scheme or not base.netloc:
            self._logger.error(f"Base URL missing scheme or host: base_url={self._base_url}")
            raise WebhookURLError(f"Invalid base URL {self._base_url!r}: missing scheme or host")

        return self._build_url(base)

    def _encode(self, message: BaseModel) -> bytes:
        try:
            return message.model_dump_json(exclude_none=True).encode("utf-8")
        except PydanticSerializationError as e:
            self._logger.error(f"Failed to serialise message: err={e}")
            raise PayloadEncodingError(f"Failed to serialise message: {e}") from e

    def _deliver(self, message: BaseModel, timeout: float | None = None) -> None:
        """Post a message to the webhook and interpret the response.

        :param message: Provider message envelope.
        :param timeout: Request timeout in seconds. Defaults to the client timeout.
        :raises BotClientError: If any step of the send fails.
        """
        if not self._credential:
            self._logger.error(f"{self.PROVIDER} webhook {self.CREDENTIAL_NAME} not provided")
            raise MissingCredentialError(f"{self.PROVIDER}: need {self.CREDENTIAL_NAME}")

        url = self._webhook_url()
        body = self._encode(message)
        request_timeout = timeout or self._timeout

        try:
            response = self._session.post(
                url,
                data=body,
                headers={"Content-Type": JSON_CONTENT_TYPE},
                timeout=request_timeout,
            )
            content = response.content
        except requests.exceptions.Timeout as e:
            self._logger.error(f"Webhook request timed out: timeout={request_timeout}s, err={e}")
            raise WebhookTransportError(
                f"{self.PROVIDER} webhook request timed out after {request_timeout}s"
            ) from e
        except requests.exceptions.RequestException as e:
            self._logger.error(f"Webhook request failed: err={e}")
            raise WebhookTransportError(f"{self.PROVIDER} webhook request failed: {e}") from e

        if response.status_code != requests.codes.ok:
            self._logger.error(
                f"Unexpected response status: status_code={response.status_code}, body={content!r}"
            )
            raise UnexpectedStatusError(response.status_code)

        content_type = response.headers.get("Content-Type", "")
        if not content_type.startswith(JSON_CONTENT_TYPE):
            self._logger.error(
                f"Unexpected response content type: content_type={content_type}, body={content!r}"
            )
            raise UnexpectedContentTypeError(content_type)

        self._check_response(content)
        self._logger.info(f"{self.PROVIDER} message sent successfully")
