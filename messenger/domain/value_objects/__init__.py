"""
VALUE OBJECTS - Immutable, self-validating types.
"""

from messenger.domain.value_objects.conversation_id import ConversationId
from messenger.domain.value_objects.username import Username
from messenger.domain.value_objects.user_email import UserEmail

__all__ = [
    "ConversationId",
    "Username",
    "UserEmail",
]
