"""
Sample users and messages for local development and demos.

Loaded by the managers when constructed with seed=True
(Config.SEED_SAMPLE_DATA).
"""

from messenger.domain.entities.conversation import Conversation
from messenger.domain.entities.message import Message
from messenger.domain.entities.user import User

HOUR = 3600
DAY = 86400


def sample_users(now: int) -> list[User]:
    return [
        User("alice", "alice@example.com", "Alice Johnson", True, now, now - DAY),
        User("bob", "bob@example.com", "Bob Smith", False, now - HOUR, now - 2 * DAY),
        User(
            "charlie", "charlie@example.com", "Charlie Brown", True, now, now - 3 * DAY
        ),
    ]


def sample_conversations(now: int) -> list[Conversation]:
    conversation = Conversation.start("alice", "bob", now - 3600)
    for message in (
        Message("msg_1", "alice", "bob", "Hello Bob! How are you?", now - 3600, True),
        Message(
            "msg_2", "bob", "alice", "Hi Alice! I'm doing great, thanks!", now - 3500, True
        ),
        Message("msg_3", "alice", "bob", "That's wonderful to hear!", now - 3400, False),
    ):
        conversation.append(message)
    return [conversation]
