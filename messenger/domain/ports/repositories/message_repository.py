"""
Message Repository Port - Interface for messages and conversations.
Implementation: messenger/infrastructure/persistence/message_manager.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from messenger.domain.entities.conversation import Conversation
from messenger.domain.entities.message import Message
from messenger.domain.value_objects.conversation_id import ConversationId


class MessageRepository(ABC):
    @abstractmethod
    def send(self, from_user: str, to_user: str, content: str) -> str: ...

    @abstractmethod
    def mark_read(self, message_id: str, username: str) -> bool: ...

    @abstractmethod
    def delete(self, message_id: str, username: str) -> bool: ...

    @abstractmethod
    def list_conversations(self, username: str) -> list[Conversation]: ...

    @abstractmethod
    def get_conversation(
        self, conversation_id: ConversationId, username: str
    ) -> Optional[Conversation]: ...

    @abstractmethod
    def get_messages(
        self, conversation_id: ConversationId, username: str
    ) -> list[Message]: ...

    @abstractmethod
    def conversation_exists(self, conversation_id: ConversationId) -> bool: ...
