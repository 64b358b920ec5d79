"""
In-memory Message/Conversation store.

Implements MessageRepository.

Conversations are keyed by their sorted participant pair and are created
lazily by the first message between a pair. The printable ConversationId
("conv_<a>_<b>") is not unique once usernames contain "_", so lookups by id
also match on the caller being a participant.
Message ids look like "msg_<epoch>_<counter>"; the counter starts at 1 and
only grows.

Read accessors hand out deep copies so callers never observe (or mutate)
state outside the lock.
"""

import copy
import logging
import threading
import time
from typing import Callable, Optional

from messenger.domain.entities.conversation import Conversation
from messenger.domain.entities.message import Message
from messenger.domain.ports.repositories import MessageRepository
from messenger.domain.value_objects.conversation_id import ConversationId
from messenger.infrastructure.persistence.seed_data import sample_conversations

logger = logging.getLogger(__name__)


class MessageManager(MessageRepository):
    def __init__(self, seed: bool = False, clock: Callable[[], float] = time.time):
        self._conversations: dict[tuple[str, str], Conversation] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._message_counter = 1
        if seed:
            self._create_sample_messages()

    @staticmethod
    def conversation_id(user1: str, user2: str) -> ConversationId:
        return ConversationId.for_participants(user1, user2)

    def send(self, from_user: str, to_user: str, content: str) -> str:
        with self._lock:
            now = int(self._clock())
            message = Message(
                id=self._next_message_id(now),
                from_user=from_user,
                to_user=to_user,
                content=content,
                timestamp=now,
            )

            key = Conversation.key_for(from_user, to_user)
            conversation = self._conversations.get(key)
            if conversation is None:
                conversation = Conversation.start(from_user, to_user, now)
                self._conversations[key] = conversation

            conversation.append(message)

        logger.info("Message sent: %s from %s to %s", message.id, from_user, to_user)
        return message.id

    def mark_read(self, message_id: str, username: str) -> bool:
        with self._lock:
            for conversation in self._conversations.values():
                message = conversation.find_message(message_id)
                if message is not None and message.to_user == username:
                    message.mark_read()
                    logger.info("Message marked as read: %s by %s", message_id, username)
                    return True
        return False

    def delete(self, message_id: str, username: str) -> bool:
        with self._lock:
            for conversation in self._conversations.values():
                message = conversation.find_message(message_id)
                if message is not None and message.from_user == username:
                    conversation.messages.remove(message)
                    logger.info("Message deleted: %s by %s", message_id, username)
                    return True
        return False

    def list_conversations(self, username: str) -> list[Conversation]:
        with self._lock:
            conversations = [
                copy.deepcopy(conversation)
                for conversation in self._conversations.values()
                if conversation.has_participant(username)
            ]
        # Most recent first
        conversations.sort(key=lambda c: c.last_activity, reverse=True)
        return conversations

    def get_conversation(
        self, conversation_id: ConversationId, username: str
    ) -> Optional[Conversation]:
        with self._lock:
            conversation = self._find(conversation_id, username)
            if conversation is None:
                return None
            return copy.deepcopy(conversation)

    def get_messages(
        self, conversation_id: ConversationId, username: str
    ) -> list[Message]:
        with self._lock:
            conversation = self._find(conversation_id, username)
            if conversation is None:
                return []
            return copy.deepcopy(conversation.messages)

    def conversation_exists(self, conversation_id: ConversationId) -> bool:
        with self._lock:
            return any(
                conversation.id == conversation_id
                for conversation in self._conversations.values()
            )

    def _find(
        self, conversation_id: ConversationId, username: str
    ) -> Optional[Conversation]:
        # Caller holds the lock
        for conversation in self._conversations.values():
            if conversation.id == conversation_id and conversation.has_participant(
                username
            ):
                return conversation
        return None

    def _next_message_id(self, now: int) -> str:
        message_id = f"msg_{now}_{self._message_counter}"
        self._message_counter += 1
        return message_id

    def _create_sample_messages(self) -> None:
        for conversation in sample_conversations(int(self._clock())):
            self._conversations[conversation.key] = conversation
            logger.info("Sample messages created for conversation: %s", conversation.id)
