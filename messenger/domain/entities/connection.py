"""
Connection Entity - A registered client connection owned by one user.
"""

from dataclasses import dataclass


@dataclass
class Connection:
    connection_id: str
    user_id: str
    connected_at: int
    last_activity: int
    is_active: bool = True

    def touch(self, now: int) -> None:
        self.last_activity = now

    def is_idle(self, now: int, timeout: int) -> bool:
        return now - self.last_activity > timeout
