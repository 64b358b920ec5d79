"""
In-memory User store.

Implements UserRepository. Users are keyed by username and never deleted.
Lists are returned sorted by username.
"""

import copy
import logging
import threading
import time
from typing import Callable, Optional

from messenger.domain.entities.user import User
from messenger.domain.ports.repositories import UserRepository
from messenger.infrastructure.persistence.seed_data import sample_users

logger = logging.getLogger(__name__)


class UserManager(UserRepository):
    def __init__(self, seed: bool = False, clock: Callable[[], float] = time.time):
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()
        self._clock = clock
        if seed:
            self._create_sample_users()

    def exists(self, username: str) -> bool:
        with self._lock:
            return username in self._users

    def add(self, user: User) -> bool:
        with self._lock:
            if user.username in self._users:
                return False
            self._users[user.username] = copy.copy(user)
        logger.info("User added: %s", user.username)
        return True

    def update(
        self,
        username: str,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> bool:
        with self._lock:
            user = self._users.get(username)
            if user is None:
                return False
            user.apply_updates(full_name=full_name, email=email)
        logger.info("User updated: %s", username)
        return True

    def set_online_status(self, username: str, is_online: bool) -> bool:
        with self._lock:
            user = self._users.get(username)
            if user is None:
                return False
            user.set_online(is_online, int(self._clock()))
        logger.info(
            "User status updated: %s -> %s",
            username,
            "online" if is_online else "offline",
        )
        return True

    def get(self, username: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(username)
            return copy.copy(user) if user else None

    def list_all(self, exclude_username: str = "") -> list[User]:
        with self._lock:
            return [
                copy.copy(user)
                for name, user in sorted(self._users.items())
                if name != exclude_username
            ]

    def search(self, query: str, exclude_username: str = "") -> list[User]:
        with self._lock:
            return [
                copy.copy(user)
                for name, user in sorted(self._users.items())
                if name != exclude_username and user.matches(query)
            ]

    def _create_sample_users(self) -> None:
        for user in sample_users(int(self._clock())):
            self._users[user.username] = user
        logger.info("Sample users created: %s", ", ".join(self._users))
