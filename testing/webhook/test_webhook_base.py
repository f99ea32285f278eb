"""Tests for the shared webhook client base class."""

import unittest
from typing import Any
from unittest.mock import MagicMock, PropertyMock
from urllib.parse import SplitResult

import requests
from pydantic import BaseModel

from chatbot_notify.exceptions import (
    PayloadEncodingError,
    ProviderError,
    UnexpectedStatusError,
    WebhookTransportError,
)
from chatbot_notify.webhook.base import DEFAULT_REQUEST_TIMEOUT, WebhookBotClient
from testing.webhook.fixtures import make_response, make_session


class _EchoMessage(BaseModel):
    value: Any


class _StubClient(WebhookBotClient):
    """Minimal provider used to exercise the shared send path."""

    PROVIDER = "stub"
    DEFAULT_BASE_URL = "http://stub.invalid"

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(credential="secret", **kwargs)
        self.checked_bodies: list[bytes] = []

    def _build_url(self, base: SplitResult) -> str:
        return base._replace(path="/hook").geturl()

    def _check_response(self, body: bytes) -> None:
        self.checked_bodies.append(body)
        if body != b"{}":
            raise ProviderError(self.PROVIDER, 1, body.decode())


class TestWebhookBotClient(unittest.TestCase):
    """Tests for WebhookBotClient._deliver."""

    def test_abstract_class_cannot_be_instantiated(self) -> None:
        """Test that the base class requires provider hooks."""
        with self.assertRaises(TypeError):
            WebhookBotClient(credential="secret")  # type: ignore[abstract]

    def test_deliver_checks_full_body(self) -> None:
        """Test that the provider check receives the full response body."""
        session = make_session(make_response("{}"))
        client = _StubClient(session=session)

        client._deliver(_EchoMessage(value=1))

        self.assertEqual(client.checked_bodies, [b"{}"])
        self.assertEqual(session.post.call_args.args[0], "http://stub.invalid/hook")
        self.assertEqual(session.post.call_args.kwargs["data"], b'{"value":1}')
        self.assertEqual(session.post.call_args.kwargs["timeout"], DEFAULT_REQUEST_TIMEOUT)

    def test_content_type_with_parameters_accepted(self) -> None:
        """Test that a JSON content type with a charset parameter is accepted."""
        session = make_session(make_response("{}", content_type="application/json;charset=UTF-8"))
        client = _StubClient(session=session)

        client._deliver(_EchoMessage(value=1))

        self.assertEqual(len(client.checked_bodies), 1)

    def test_unserialisable_message_raises_encoding_error(self) -> None:
        """Test that serialisation failures raise PayloadEncodingError."""
        session = make_session(make_response("{}"))
        client = _StubClient(session=session)

        with self.assertRaises(PayloadEncodingError):
            client._deliver(_EchoMessage(value=object()))

        session.post.assert_not_called()

    def test_body_read_failure_raises_transport_error(self) -> None:
        """Test that errors while reading the body raise WebhookTransportError."""
        response = MagicMock()
        response.status_code = 200
        type(response).content = PropertyMock(
            side_effect=requests.exceptions.ChunkedEncodingError("connection broken")
        )
        client = _StubClient(session=make_session(response))

        with self.assertRaises(WebhookTransportError):
            client._deliver(_EchoMessage(value=1))

    def test_provider_check_not_reached_on_bad_status(self) -> None:
        """Test that the envelope is not decoded when the status is wrong."""
        session = make_session(make_response("{}", status_code=500))
        client = _StubClient(session=session)

        with self.assertRaises(UnexpectedStatusError):
            client._deliver(_EchoMessage(value=1))

        self.assertEqual(client.checked_bodies, [])


if __name__ == "__main__":
    unittest.main()
