"""
GetConversationMessages Query - Full message history of one conversation.

Steps:
1. Verify conversation exists
2. Verify user is a participant
3. Load messages (oldest first)
"""

from dataclasses import dataclass

from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.message import Message
from messenger.domain.exceptions import AccessDeniedError, EntityNotFoundError
from messenger.domain.ports.repositories import MessageRepository
from messenger.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class GetConversationMessagesQuery(Query[list[Message]]):
    conversation_id: str
    username: str


class GetConversationMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    def execute(self, query: GetConversationMessagesQuery) -> list[Message]:
        try:
            conversation_id = ConversationId(query.conversation_id)
        except ValueError as e:
            raise EntityNotFoundError("Conversation not found") from e

        # 1. Get conversation
        if not self._message_repository.conversation_exists(conversation_id):
            raise EntityNotFoundError(f"Conversation {conversation_id} not found")

        # 2. Verify participation
        conversation = self._message_repository.get_conversation(
            conversation_id, query.username
        )
        if conversation is None:
            raise AccessDeniedError("You don't have access to this conversation")

        # 3. Messages in send order
        return conversation.messages
