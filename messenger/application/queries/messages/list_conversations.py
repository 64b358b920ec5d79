"""List Conversations Query - Most recently active first."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Query, QueryHandler
from messenger.domain.entities.conversation import Conversation
from messenger.domain.ports.repositories import MessageRepository


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    username: str


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        return self._message_repository.list_conversations(query.username)
