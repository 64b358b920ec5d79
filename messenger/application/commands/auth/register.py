"""Register Command."""

import time
from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.dto.auth import TokenDTO
from messenger.config.settings import Config
from messenger.domain.entities.user import User
from messenger.domain.exceptions import DomainValidationError, EntityAlreadyExistsError
from messenger.domain.ports.repositories import UserRepository
from messenger.domain.ports.token_service import TokenService
from messenger.domain.value_objects.user_email import UserEmail
from messenger.domain.value_objects.username import Username


@dataclass(frozen=True)
class RegisterCommand(Command[TokenDTO]):
    username: str
    password: str
    email: str
    full_name: str = ""


class RegisterHandler(CommandHandler[TokenDTO]):
    def __init__(self, user_repository: UserRepository, token_service: TokenService):
        self._user_repository = user_repository
        self._token_service = token_service

    def execute(self, command: RegisterCommand) -> TokenDTO:
        try:
            username = Username(command.username)
            email = UserEmail(command.email)
        except ValueError as e:
            raise DomainValidationError(str(e)) from e

        if len(command.password) < Config.MIN_PASSWORD_LENGTH:
            raise DomainValidationError(
                f"Password must be at least {Config.MIN_PASSWORD_LENGTH} characters"
            )

        now = int(time.time())
        user = User(
            username=username.value,
            email=email.value,
            full_name=command.full_name,
            is_online=False,
            last_seen=now,
            created_at=now,
        )
        if not self._user_repository.add(user):
            raise EntityAlreadyExistsError("Username already exists")

        return TokenDTO(
            username=username.value,
            access_token=self._token_service.issue(username.value),
            expires_in=Config.TOKEN_EXPIRES_IN,
        )
