"""Delete Message Command - Only the sender may delete a message."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import EntityNotFoundError
from messenger.domain.ports.repositories import MessageRepository


@dataclass(frozen=True)
class DeleteMessageCommand(Command[bool]):
    message_id: str
    username: str


class DeleteMessageHandler(CommandHandler[bool]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    def execute(self, command: DeleteMessageCommand) -> bool:
        if not self._message_repository.delete(command.message_id, command.username):
            raise EntityNotFoundError("Message not found or access denied")
        return True
