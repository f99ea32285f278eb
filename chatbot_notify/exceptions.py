"""Custom exceptions for the webhook bot clients."""


class BotClientError(Exception):
    """Base exception for webhook bot client errors."""


class MissingCredentialError(BotClientError):
    """Raised when a send is attempted without a bot token or key.

    No request is issued when this is raised.
    """


class WebhookURLError(BotClientError):
    """Raised when the webhook URL cannot be built from the base URL."""


class PayloadEncodingError(BotClientError):
    """Raised when a message cannot be serialised to JSON."""


class WebhookTransportError(BotClientError):
    """Raised when the HTTP request fails (connection, timeout, read)."""


class UnexpectedStatusError(BotClientError):
    """Raised when the webhook responds with a status other than 200."""

    def __init__(self, status_code: int) -> None:
        """Initialise UnexpectedStatusError.

        :param status_code: HTTP status code of the response.
        """
        self.status_code = status_code
        super().__init__(f"Unexpected response status: {status_code}")


class UnexpectedContentTypeError(BotClientError):
    """Raised when the webhook response is not JSON."""

    def __init__(self, content_type: str) -> None:
        """Initialise UnexpectedContentTypeError.

        :param content_type: Content-Type header of the response.
        """
        self.content_type = content_type
        super().__init__(f"Unexpected response content type: {content_type!r}")


class ResponseDecodingError(BotClientError):
    """Raised when the response body does not match the provider envelope."""


class ProviderError(BotClientError):
    """Raised when the provider reports a non-zero status code.

    The provider's code and message are kept verbatim.
    """

    def __init__(self, provider: str, code: int, message: str) -> None:
        """Initialise ProviderError.

        :param provider: Name of the provider that returned the error.
        :param code: Provider status code.
        :param message: Provider error message.
        """
        self.provider = provider
        self.code = code
        self.provider_message = message
        super().__init__(f"{provider} webhook returned error: code={code}, msg={message}")
