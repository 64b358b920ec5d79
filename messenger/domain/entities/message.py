"""
Message Entity - A single direct message between two users.
"""

from dataclasses import dataclass


@dataclass
class Message:
    id: str
    from_user: str
    to_user: str
    content: str
    timestamp: int
    is_read: bool = False

    def mark_read(self) -> None:
        self.is_read = True
