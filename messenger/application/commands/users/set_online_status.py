"""Set Online Status Command."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.exceptions import EntityNotFoundError
from messenger.domain.ports.repositories import UserRepository


@dataclass(frozen=True)
class SetOnlineStatusCommand(Command[bool]):
    username: str
    is_online: bool


class SetOnlineStatusHandler(CommandHandler[bool]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    def execute(self, command: SetOnlineStatusCommand) -> bool:
        if not self._user_repository.set_online_status(
            command.username, command.is_online
        ):
            raise EntityNotFoundError("User not found")
        return command.is_online
