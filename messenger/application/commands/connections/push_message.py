"""Direct and broadcast pushes through the push gateway."""

import time
from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import DomainValidationError
from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.ports.repositories import ConnectionRepository


def _require_text(message: str) -> None:
    if not message or not message.strip():
        raise DomainValidationError("Message cannot be empty")


@dataclass(frozen=True)
class SendDirectCommand(Command[bool]):
    from_user: str
    to_user: str
    message: str


class SendDirectHandler(CommandHandler[bool]):
    """Returns whether the recipient currently has a registered connection."""

    def __init__(self, connections: ConnectionRepository, push_gateway: PushGateway):
        self._connections = connections
        self._push_gateway = push_gateway

    def execute(self, command: SendDirectCommand) -> bool:
        if not command.to_user:
            raise DomainValidationError("Recipient cannot be empty")
        _require_text(command.message)

        self._push_gateway.send_to_user(
            command.to_user,
            {
                "from": command.from_user,
                "to": command.to_user,
                "message": command.message,
                "timestamp": int(time.time()),
                "type": "direct_message",
            },
        )
        return self._connections.is_user_online(command.to_user)


@dataclass(frozen=True)
class BroadcastCommand(Command[int]):
    from_user: str
    message: str


class BroadcastHandler(CommandHandler[int]):
    """Returns the number of users the broadcast was pushed to."""

    def __init__(self, connections: ConnectionRepository, push_gateway: PushGateway):
        self._connections = connections
        self._push_gateway = push_gateway

    def execute(self, command: BroadcastCommand) -> int:
        _require_text(command.message)
        return self._push_gateway.broadcast(
            self._connections.online_users(),
            {
                "from": command.from_user,
                "message": command.message,
                "timestamp": int(time.time()),
                "type": "broadcast",
            },
        )
