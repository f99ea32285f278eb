"""Tests for WeCom message and response models."""

import unittest

from pydantic import TypeAdapter, ValidationError

from chatbot_notify.wecom.models import (
    WeComMarkdownMessage,
    WeComMessage,
    WeComSendResponse,
    WeComTextContent,
    WeComTextMessage,
)


class TestWeComMessage(unittest.TestCase):
    """Tests for the WeCom message union."""

    def test_discriminator_selects_markdown(self) -> None:
        """Test that the msgtype tag selects the markdown variant."""
        message = TypeAdapter(WeComMessage).validate_python(
            {"msgtype": "markdown", "markdown": {"content": "# hi"}}
        )

        self.assertIsInstance(message, WeComMarkdownMessage)

    def test_mismatched_tag_and_payload_rejected(self) -> None:
        """Test that a text tag with a markdown payload is rejected."""
        with self.assertRaises(ValidationError):
            TypeAdapter(WeComMessage).validate_python(
                {"msgtype": "text", "markdown": {"content": "# hi"}}
            )

    def test_text_tag_is_fixed(self) -> None:
        """Test that a text message cannot carry another tag."""
        with self.assertRaises(ValidationError):
            WeComTextMessage(msgtype="markdown", text=WeComTextContent(content="hi"))


class TestWeComSendResponse(unittest.TestCase):
    """Tests for the WeCom response envelope."""

    def test_unknown_fields_ignored(self) -> None:
        """Test that extra response fields are ignored."""
        response = WeComSendResponse.model_validate_json(
            '{"errcode": 0, "errmsg": "ok", "extra": true}'
        )

        self.assertEqual(response.errcode, 0)
        self.assertEqual(response.errmsg, "ok")

    def test_missing_fields_decode_to_zero_values(self) -> None:
        """Test that absent fields take their zero values."""
        response = WeComSendResponse.model_validate_json("{}")

        self.assertEqual(response.errcode, 0)
        self.assertEqual(response.errmsg, "")

    def test_null_errmsg_decodes_to_empty(self) -> None:
        """Test that a null errmsg keeps the error code."""
        response = WeComSendResponse.model_validate_json('{"errcode": 93000, "errmsg": null}')

        self.assertEqual(response.errcode, 93000)
        self.assertEqual(response.errmsg, "")

    def test_non_object_body_rejected(self) -> None:
        """Test that a JSON body that is not an object fails to validate."""
        with self.assertRaises(ValidationError):
            WeComSendResponse.model_validate_json("[]")


if __name__ == "__main__":
    unittest.main()
