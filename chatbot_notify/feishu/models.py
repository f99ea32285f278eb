"""Pydantic models for Feishu bot webhook messages and responses."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Documented Feishu limit; not enforced client-side
MAX_TEXT_BYTES = 2048


class FeishuTextContent(BaseModel):
    """Content of a Feishu text message."""

    text: str = Field(..., description="Message text; must contain the bot's keyword if set")


class FeishuTextMessage(BaseModel):
    """Feishu text message envelope."""

    msg_type: Literal["text"] = "text"
    content: FeishuTextContent


# Supported Feishu message types; text is the only one so far
FeishuMessage = FeishuTextMessage


class FeishuSendResponse(BaseModel):
    """Response envelope returned by the Feishu webhook.

    A non-zero ``code`` indicates failure. Absent fields decode to their zero
    values, so the legacy ``{"StatusCode": 0, ...}`` success body has code 0.
    """

    model_config = ConfigDict(extra="ignore")

    code: int = Field(default=0, description="Status code, 0 on success")
    msg: str = Field(default="", description="Status message")
    data: dict[str, Any] | None = Field(default=None, description="Returned data")

    @field_validator("msg", mode="before")
    @classmethod
    def null_msg_to_empty(cls, v: str | None) -> str:
        """Treat a null message as empty.

        :param v: Raw message value.
        :returns: The message, or an empty string when null.
        """
        return "" if v is None else v
