"""
User Repository Port - Interface for user storage.
Implementation: messenger/infrastructure/persistence/user_manager.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from messenger.domain.entities.user import User


class UserRepository(ABC):
    @abstractmethod
    def exists(self, username: str) -> bool: ...

    @abstractmethod
    def add(self, user: User) -> bool: ...

    @abstractmethod
    def update(
        self,
        username: str,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> bool: ...

    @abstractmethod
    def set_online_status(self, username: str, is_online: bool) -> bool: ...

    @abstractmethod
    def get(self, username: str) -> Optional[User]: ...

    @abstractmethod
    def list_all(self, exclude_username: str = "") -> list[User]: ...

    @abstractmethod
    def search(self, query: str, exclude_username: str = "") -> list[User]: ...
