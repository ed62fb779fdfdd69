# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Chat message delivered to the host."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ModelChatMessage(BaseModel):
    """Last message of a conversation, as carried in a realtime frame.

    Attributes:
        conversation_id: Conversation the message belongs to.
        message_id: Message identifier.
        sender: Sender member id (XUID).
        sender_gamertag: Sender gamertag if the service sent it.
        content_payload: Raw content block with the text parts.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    conversation_id: str = Field(default="", alias="conversationId")
    message_id: str = Field(default="", alias="messageId")
    sender: str = Field(..., min_length=1)
    sender_gamertag: str = Field(default="", alias="senderGamerTag")
    content_payload: dict[str, Any] = Field(
        default_factory=dict, alias="contentPayload"
    )

    @property
    def text(self) -> str:
        """Concatenated text parts of the message."""
        content = self.content_payload.get("content")
        parts = content.get("parts", []) if isinstance(content, dict) else []
        return "".join(
            str(part.get("text", ""))
            for part in parts
            if isinstance(part, dict) and part.get("contentType", "text") == "text"
        )


__all__ = ["ModelChatMessage"]
