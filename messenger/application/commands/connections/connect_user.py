"""Connect User Command - Register a new connection for a user."""

from dataclasses import dataclass
from messenger.application.commands.connections.status_notifications import (
    notify_user_status_change,
)
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import DomainValidationError
from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.ports.repositories import ConnectionRepository
from messenger.observability.metrics import set_active_connections


@dataclass
class ConnectResult:
    connection_id: str
    user_id: str


@dataclass(frozen=True)
class ConnectUserCommand(Command[ConnectResult]):
    user_id: str


class ConnectUserHandler(CommandHandler[ConnectResult]):
    def __init__(self, connections: ConnectionRepository, push_gateway: PushGateway):
        self._connections = connections
        self._push_gateway = push_gateway

    def execute(self, command: ConnectUserCommand) -> ConnectResult:
        if not command.user_id:
            raise DomainValidationError(
                "user_id parameter is required (in URL params, JSON body, "
                "or extracted from auth token)"
            )

        connection_id = self._connections.add(command.user_id)
        set_active_connections(self._connections.total_connections())
        notify_user_status_change(
            self._connections, self._push_gateway, command.user_id, True
        )
        return ConnectResult(connection_id=connection_id, user_id=command.user_id)
