"""
Persistence Layer - In-memory store implementations.

Each manager guards its whole state with one lock; every public operation
holds it for its full duration.
"""

from messenger.infrastructure.persistence.user_manager import UserManager
from messenger.infrastructure.persistence.message_manager import MessageManager
from messenger.infrastructure.persistence.connection_manager import (
    ConnectionManager,
)

__all__ = [
    "UserManager",
    "MessageManager",
    "ConnectionManager",
]
