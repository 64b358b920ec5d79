"""
Login Command.

Credentials are checked for shape only (non-empty username, password of at
least MIN_PASSWORD_LENGTH characters); there is no password store.
"""

from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.dto.auth import TokenDTO
from messenger.config.settings import Config
from messenger.domain.exceptions import AuthenticationError
from messenger.domain.ports.token_service import TokenService


def validate_credentials(username: str, password: str) -> bool:
    return bool(username) and bool(password) and len(password) >= Config.MIN_PASSWORD_LENGTH


@dataclass(frozen=True)
class LoginCommand(Command[TokenDTO]):
    username: str
    password: str


class LoginHandler(CommandHandler[TokenDTO]):
    def __init__(self, token_service: TokenService):
        self._token_service = token_service

    def execute(self, command: LoginCommand) -> TokenDTO:
        if not validate_credentials(command.username, command.password):
            raise AuthenticationError("Invalid credentials")

        return TokenDTO(
            username=command.username,
            access_token=self._token_service.issue(command.username),
            expires_in=Config.TOKEN_EXPIRES_IN,
        )
