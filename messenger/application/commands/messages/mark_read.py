"""Mark Read Command - Only the recipient may mark a message as read."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import EntityNotFoundError
from messenger.domain.ports.repositories import MessageRepository


@dataclass(frozen=True)
class MarkReadCommand(Command[bool]):
    message_id: str
    username: str


class MarkReadHandler(CommandHandler[bool]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    def execute(self, command: MarkReadCommand) -> bool:
        if not self._message_repository.mark_read(command.message_id, command.username):
            raise EntityNotFoundError("Message not found or access denied")
        return True
