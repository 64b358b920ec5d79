"""
REPOSITORY PORTS - Data store interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines the operations the application layer needs
- Leaves storage and locking to the implementation

Infrastructure layer provides implementations.
"""

from messenger.domain.ports.repositories.user_repository import UserRepository
from messenger.domain.ports.repositories.message_repository import MessageRepository
from messenger.domain.ports.repositories.connection_repository import (
    ConnectionRepository,
)

__all__ = [
    "UserRepository",
    "MessageRepository",
    "ConnectionRepository",
]
