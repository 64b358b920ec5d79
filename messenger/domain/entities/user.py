"""
User Entity - A messenger account.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    username: str
    email: str
    full_name: str
    is_online: bool
    last_seen: int
    created_at: int

    def set_online(self, is_online: bool, now: int) -> None:
        self.is_online = is_online
        self.last_seen = now

    def apply_updates(
        self, full_name: Optional[str] = None, email: Optional[str] = None
    ) -> None:
        if full_name is not None:
            self.full_name = full_name
        if email is not None:
            self.email = email

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over username and full name."""
        needle = query.lower()
        return needle in self.username.lower() or needle in self.full_name.lower()
