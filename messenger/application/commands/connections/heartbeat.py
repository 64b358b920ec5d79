"""Heartbeat Command - Keep a connection from being swept."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import DomainValidationError, EntityNotFoundError
from messenger.domain.ports.repositories import ConnectionRepository


@dataclass(frozen=True)
class HeartbeatCommand(Command[bool]):
    connection_id: str


class HeartbeatHandler(CommandHandler[bool]):
    def __init__(self, connections: ConnectionRepository):
        self._connections = connections

    def execute(self, command: HeartbeatCommand) -> bool:
        if not command.connection_id:
            raise DomainValidationError("connection_id parameter is required")
        if not self._connections.touch(command.connection_id):
            raise EntityNotFoundError("Connection not found")
        return True
