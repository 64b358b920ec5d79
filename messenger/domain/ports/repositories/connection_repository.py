"""
Connection Repository Port - Interface for the connection registry.
Implementation: messenger/infrastructure/persistence/connection_manager.py
"""

from abc import ABC, abstractmethod
from typing import Any


class ConnectionRepository(ABC):
    @abstractmethod
    def add(self, user_id: str) -> str: ...

    @abstractmethod
    def remove(self, connection_id: str) -> bool: ...

    @abstractmethod
    def remove_all(self, user_id: str) -> bool: ...

    @abstractmethod
    def touch(self, connection_id: str) -> bool: ...

    @abstractmethod
    def sweep_inactive(self) -> int: ...

    @abstractmethod
    def online_users(self) -> list[str]: ...

    @abstractmethod
    def total_connections(self) -> int: ...

    @abstractmethod
    def active_users_count(self) -> int: ...

    @abstractmethod
    def is_user_online(self, user_id: str) -> bool: ...

    @abstractmethod
    def stats(self) -> dict[str, Any]: ...
