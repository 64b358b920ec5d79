"""
Disconnect Command.

Removes one connection (connection_id) or every connection of a user
(user_id). connection_id wins when both are given. Removing by user
broadcasts an offline notification.
"""

from dataclasses import dataclass
from typing import Optional
from messenger.application.commands.connections.status_notifications import (
    notify_user_status_change,
)
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import DomainValidationError, EntityNotFoundError
from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.ports.repositories import ConnectionRepository
from messenger.observability.metrics import set_active_connections


@dataclass(frozen=True)
class DisconnectCommand(Command[None]):
    connection_id: Optional[str] = None
    user_id: Optional[str] = None


class DisconnectHandler(CommandHandler[None]):
    def __init__(self, connections: ConnectionRepository, push_gateway: PushGateway):
        self._connections = connections
        self._push_gateway = push_gateway

    def execute(self, command: DisconnectCommand) -> None:
        if command.connection_id:
            if not self._connections.remove(command.connection_id):
                raise EntityNotFoundError("Connection not found")
        elif command.user_id:
            if not self._connections.remove_all(command.user_id):
                raise EntityNotFoundError("User not found")
            notify_user_status_change(
                self._connections, self._push_gateway, command.user_id, False
            )
        else:
            raise DomainValidationError(
                "Either connection_id or user_id parameter is required"
            )

        set_active_connections(self._connections.total_connections())
