"""
ConversationId Value Object - Order-independent key of a two-party thread.
"""

from __future__ import annotations
from dataclasses import dataclass

PREFIX = "conv_"


@dataclass(frozen=True)
class ConversationId:
    value: str  # conversation_id, presented as "conv_<a>_<b>" with a <= b

    def __post_init__(self):
        if not self.value:
            raise ValueError("Conversation ID cannot be empty")

    @classmethod
    def for_participants(cls, user1: str, user2: str) -> ConversationId:
        """Build the id for a pair; swapping the arguments yields the same id."""
        first, second = sorted((user1, user2))
        return cls(f"{PREFIX}{first}_{second}")

    def __str__(self) -> str:
        return self.value
