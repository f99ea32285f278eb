"""Pydantic models for WeCom (WeChat Work) group bot messages and responses."""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Documented WeCom limits; not enforced client-side
MAX_TEXT_BYTES = 2048
MAX_MARKDOWN_BYTES = 4096

# Mention value that notifies every group member
MENTION_ALL = "@all"


class WeComTextContent(BaseModel):
    """Content of a WeCom text message."""

    content: str = Field(..., description="Text content, UTF-8, at most 2048 bytes")
    mentioned_list: list[str] | None = Field(
        default=None,
        description="User IDs to mention; '@all' mentions everyone",
    )
    mentioned_mobile_list: list[str] | None = Field(
        default=None,
        description="Mobile numbers to mention; '@all' mentions everyone",
    )


class WeComMarkdownContent(BaseModel):
    """Content of a WeCom markdown message."""

    content: str = Field(..., description="Markdown content, UTF-8, at most 4096 bytes")


class WeComTextMessage(BaseModel):
    """WeCom text message envelope."""

    msgtype: Literal["text"] = "text"
    text: WeComTextContent


class WeComMarkdownMessage(BaseModel):
    """WeCom markdown message envelope."""

    msgtype: Literal["markdown"] = "markdown"
    markdown: WeComMarkdownContent


WeComMessage = Annotated[WeComTextMessage | WeComMarkdownMessage, Field(discriminator="msgtype")]


class WeComSendResponse(BaseModel):
    """Response envelope returned by the WeCom webhook.

    A non-zero ``errcode`` indicates failure. Absent fields decode to their
    zero values.
    """

    model_config = ConfigDict(extra="ignore")

    errcode: int = Field(default=0, description="Error code, 0 on success")
    errmsg: str = Field(default="", description="Error description")

    @field_validator("errmsg", mode="before")
    @classmethod
    def null_errmsg_to_empty(cls, v: str | None) -> str:
        """Treat a null error message as empty.

        :param v: Raw error message value.
        :returns: The message, or an empty string when null.
        """
        return "" if v is None else v
