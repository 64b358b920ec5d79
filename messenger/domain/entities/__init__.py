"""
ENTITIES - Business objects with identity

Plain dataclasses; the in-memory stores own and mutate them under their locks.
"""

from messenger.domain.entities.user import User
from messenger.domain.entities.message import Message
from messenger.domain.entities.conversation import Conversation
from messenger.domain.entities.connection import Connection

__all__ = [
    "User",
    "Message",
    "Conversation",
    "Connection",
]
