"""
Conversation Entity - The ordered message thread between two users.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from messenger.domain.entities.message import Message
from messenger.domain.value_objects.conversation_id import ConversationId


@dataclass
class Conversation:
    id: ConversationId
    participants: tuple[str, str]
    last_activity: int
    messages: list[Message] = field(default_factory=list)

    @classmethod
    def start(cls, user1: str, user2: str, now: int) -> Conversation:
        return cls(
            id=ConversationId.for_participants(user1, user2),
            participants=(user1, user2),
            last_activity=now,
        )

    @staticmethod
    def key_for(user1: str, user2: str) -> tuple[str, str]:
        """Order-independent pair key. Unlike the printable id it is unique per pair."""
        first, second = sorted((user1, user2))
        return (first, second)

    @property
    def key(self) -> tuple[str, str]:
        return Conversation.key_for(*self.participants)

    def has_participant(self, username: str) -> bool:
        return username in self.participants

    def append(self, message: Message) -> None:
        self.messages.append(message)
        self.last_activity = message.timestamp

    def find_message(self, message_id: str) -> Optional[Message]:
        for message in self.messages:
            if message.id == message_id:
                return message
        return None

    @property
    def last_message(self) -> Optional[Message]:
        return self.messages[-1] if self.messages else None
