"""Message and conversation queries."""

from messenger.application.queries.messages.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from messenger.application.queries.messages.get_conversation_messages import (
    GetConversationMessagesQuery,
    GetConversationMessagesHandler,
)

__all__ = [
    "ListConversationsQuery",
    "ListConversationsHandler",
    "GetConversationMessagesQuery",
    "GetConversationMessagesHandler",
]
