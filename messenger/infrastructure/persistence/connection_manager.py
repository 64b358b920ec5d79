"""
In-memory connection registry.

Implements ConnectionRepository. Keeps two indexes under one lock:
connections by id, and the set of connection ids per user. A user bucket is
dropped as soon as it becomes empty, so "user has a bucket" is the same as
"user is online".
"""

import logging
import threading
import time
from typing import Any, Callable

from messenger.config.settings import Config
from messenger.domain.entities.connection import Connection
from messenger.domain.ports.repositories import ConnectionRepository

logger = logging.getLogger(__name__)


class ConnectionManager(ConnectionRepository):
    def __init__(
        self,
        idle_timeout: int = Config.CONNECTION_IDLE_TIMEOUT,
        clock: Callable[[], float] = time.time,
    ):
        self._connections: dict[str, Connection] = {}
        self._user_connections: dict[str, set[str]] = {}
        self._lock = threading.Lock()
        self._clock = clock
        self._idle_timeout = idle_timeout
        self._connection_counter = 0

    @property
    def idle_timeout(self) -> int:
        return self._idle_timeout

    def add(self, user_id: str) -> str:
        with self._lock:
            now = int(self._clock())
            self._connection_counter += 1
            connection_id = f"conn_{self._connection_counter}_{now}"
            self._connections[connection_id] = Connection(
                connection_id=connection_id,
                user_id=user_id,
                connected_at=now,
                last_activity=now,
            )
            self._user_connections.setdefault(user_id, set()).add(connection_id)

        logger.info("Connection added: %s for user: %s", connection_id, user_id)
        return connection_id

    def remove(self, connection_id: str) -> bool:
        with self._lock:
            connection = self._drop(connection_id)
        if connection is None:
            return False
        logger.info(
            "Connection removed: %s for user: %s", connection_id, connection.user_id
        )
        return True

    def remove_all(self, user_id: str) -> bool:
        with self._lock:
            connection_ids = self._user_connections.pop(user_id, None)
            if connection_ids is None:
                return False
            for connection_id in connection_ids:
                self._connections.pop(connection_id, None)
        logger.info("All connections removed for user: %s", user_id)
        return True

    def touch(self, connection_id: str) -> bool:
        with self._lock:
            connection = self._connections.get(connection_id)
            if connection is None:
                return False
            connection.touch(int(self._clock()))
            return True

    def sweep_inactive(self) -> int:
        with self._lock:
            now = int(self._clock())
            idle = [
                connection_id
                for connection_id, connection in self._connections.items()
                if connection.is_idle(now, self._idle_timeout)
            ]
            for connection_id in idle:
                self._drop(connection_id)

        if idle:
            logger.info("Cleaned up %d inactive connections", len(idle))
        return len(idle)

    def online_users(self) -> list[str]:
        with self._lock:
            return sorted(
                user_id for user_id, ids in self._user_connections.items() if ids
            )

    def total_connections(self) -> int:
        with self._lock:
            return len(self._connections)

    def active_users_count(self) -> int:
        with self._lock:
            return len(self._user_connections)

    def is_user_online(self, user_id: str) -> bool:
        with self._lock:
            return bool(self._user_connections.get(user_id))

    def stats(self) -> dict[str, Any]:
        with self._lock:
            return {
                "total_connections": len(self._connections),
                "active_users": len(self._user_connections),
                "timestamp": int(self._clock()),
            }

    def _drop(self, connection_id: str):
        # Caller holds the lock
        connection = self._connections.pop(connection_id, None)
        if connection is None:
            return None
        bucket = self._user_connections.get(connection.user_id)
        if bucket is not None:
            bucket.discard(connection_id)
            if not bucket:
                del self._user_connections[connection.user_id]
        return connection
