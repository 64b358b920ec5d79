"""Message and conversation DTOs for API responses."""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from messenger.config.settings import Config
from messenger.domain.entities.conversation import Conversation
from messenger.domain.entities.message import Message


class MessageDTO(BaseModel):
    """DTO for message data returned to clients."""

    id: str
    from_user: str
    to_user: str
    content: str
    timestamp: int
    is_read: bool

    @classmethod
    def from_entity(cls, message: Message) -> MessageDTO:
        return cls(
            id=message.id,
            from_user=message.from_user,
            to_user=message.to_user,
            content=message.content,
            timestamp=message.timestamp,
            is_read=message.is_read,
        )


class LastMessagePreviewDTO(BaseModel):
    content: str
    sender: str = Field(serialization_alias="from")
    timestamp: int

    @classmethod
    def from_entity(
        cls, message: Message, preview_length: int = Config.MESSAGE_PREVIEW_LENGTH
    ) -> LastMessagePreviewDTO:
        content = message.content[:preview_length]
        if len(message.content) > preview_length:
            content += "..."
        return cls(content=content, sender=message.from_user, timestamp=message.timestamp)


class ConversationSummaryDTO(BaseModel):
    """
    Conversation list item.

    {
        "id": "conv_alice_bob",
        "participants": ["alice", "bob"],
        "last_activity": 1700000000,
        "message_count": 3,
        "last_message": {"content": "...", "from": "alice", "timestamp": 1700000000}
    }
    """

    id: str
    participants: list[str]
    last_activity: int
    message_count: int
    last_message: Optional[LastMessagePreviewDTO] = None

    @classmethod
    def from_entity(cls, conversation: Conversation) -> ConversationSummaryDTO:
        last = conversation.last_message
        return cls(
            id=conversation.id.value,
            participants=list(conversation.participants),
            last_activity=conversation.last_activity,
            message_count=len(conversation.messages),
            last_message=LastMessagePreviewDTO.from_entity(last) if last else None,
        )
