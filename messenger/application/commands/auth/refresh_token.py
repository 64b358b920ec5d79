"""Refresh Token Command - Exchange a still-valid token for a fresh one."""

from dataclasses import dataclass
from messenger.application.common.interfaces import Command, CommandHandler
from messenger.application.dto.auth import TokenDTO
from messenger.config.settings import Config
from messenger.domain.exceptions import AuthenticationError
from messenger.domain.ports.token_service import TokenService


@dataclass(frozen=True)
class RefreshTokenCommand(Command[TokenDTO]):
    refresh_token: str


class RefreshTokenHandler(CommandHandler[TokenDTO]):
    def __init__(self, token_service: TokenService):
        self._token_service = token_service

    def execute(self, command: RefreshTokenCommand) -> TokenDTO:
        if not self._token_service.verify(command.refresh_token):
            raise AuthenticationError("Invalid refresh token")

        username = self._token_service.extract_username(command.refresh_token)
        if not username:
            raise AuthenticationError("Could not extract username from refresh token")

        return TokenDTO(
            access_token=self._token_service.issue(username),
            expires_in=Config.TOKEN_EXPIRES_IN,
        )
