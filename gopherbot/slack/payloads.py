"""Slack delayed-response message schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

FALLBACK_TEXT = "Gopher !!"
ATTACHMENT_TITLE = "gopher"


class Attachment(BaseModel):
    """Legacy Slack message attachment carrying the gopher image."""

    fallback: str
    image_url: str
    title: str
    title_link: str


class SlackResponse(BaseModel):
    """Body posted to a slash-command ``response_url``."""

    response_type: Literal["in_channel", "ephemeral"] = "in_channel"
    attachments: list[Attachment] = Field(default_factory=list)
    text: str = ""

    def to_payload(self) -> dict[str, Any]:
        """Serialize, leaving out empty ``attachments`` and ``text``."""

        payload = self.model_dump()
        if not self.attachments:
            payload.pop("attachments")
        if not self.text:
            payload.pop("text")
        return payload


def gopher_message(image_url: str) -> SlackResponse:
    """Build the in-channel message that shows ``image_url``."""

    return SlackResponse(
        attachments=[
            Attachment(
                fallback=FALLBACK_TEXT,
                image_url=image_url,
                title=ATTACHMENT_TITLE,
                title_link=image_url,
            ),
        ],
    )
