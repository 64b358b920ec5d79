"""
Push Gateway Port - Delivers payloads to connected users.
Implementation: messenger/infrastructure/push/logging_push_gateway.py
"""

from abc import ABC, abstractmethod
from typing import Any


class PushGateway(ABC):
    @abstractmethod
    def send_to_user(self, user_id: str, payload: dict[str, Any]) -> None: ...

    @abstractmethod
    def broadcast(self, user_ids: list[str], payload: dict[str, Any]) -> int:
        """Push payload to every user in user_ids; return how many were targeted."""
        ...
