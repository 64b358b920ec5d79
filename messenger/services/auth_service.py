"""Authentication service: login, registration, token verify/refresh."""

from typing import Any, Optional

from fastapi import APIRouter

from messenger.config.settings import Config
from messenger.domain.ports.token_service import TokenService
from messenger.infrastructure.persistence import UserManager
from messenger.infrastructure.security import create_token_service
from messenger.presentation.api import auth_router
from messenger.services.http_service import HttpService


class AuthService(HttpService):
    def __init__(
        self,
        port: int = Config.AUTH_SERVICE_PORT,
        user_manager: Optional[UserManager] = None,
        token_service: Optional[TokenService] = None,
        host: str = Config.HOST,
    ):
        super().__init__("AuthService", port, host)
        self.user_manager = user_manager or UserManager(seed=Config.SEED_SAMPLE_DATA)
        self.token_service = token_service or create_token_service()

    def routers(self) -> list[APIRouter]:
        return [auth_router]

    def app_state(self) -> dict[str, Any]:
        return {
            "user_repository": self.user_manager,
            "token_service": self.token_service,
        }
