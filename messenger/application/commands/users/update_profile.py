"""Update Profile Command - Partial update of full name and/or email."""

from dataclasses import dataclass
from typing import Optional
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.domain.entities.user import User
from messenger.domain.exceptions import DomainValidationError, EntityNotFoundError
from messenger.domain.ports.repositories import UserRepository
from messenger.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class UpdateProfileCommand(Command[User]):
    username: str
    full_name: Optional[str] = None
    email: Optional[str] = None


class UpdateProfileHandler(CommandHandler[User]):
    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    def execute(self, command: UpdateProfileCommand) -> User:
        if command.email is not None:
            try:
                UserEmail(command.email)
            except ValueError as e:
                raise DomainValidationError(str(e)) from e

        updated = self._user_repository.update(
            command.username, full_name=command.full_name, email=command.email
        )
        if not updated:
            raise EntityNotFoundError("User not found")

        user = self._user_repository.get(command.username)
        if user is None:
            raise EntityNotFoundError("User not found")
        return user
