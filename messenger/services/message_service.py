"""Direct messages and conversations service."""

from typing import Any, Optional

from fastapi import APIRouter

from messenger.config.settings import Config
from messenger.domain.ports.token_service import TokenService
from messenger.infrastructure.persistence import MessageManager
from messenger.infrastructure.security import create_token_service
from messenger.presentation.api import messages_router
from messenger.services.http_service import HttpService


class MessageService(HttpService):
    def __init__(
        self,
        port: int = Config.MESSAGE_SERVICE_PORT,
        message_manager: Optional[MessageManager] = None,
        token_service: Optional[TokenService] = None,
        host: str = Config.HOST,
    ):
        super().__init__("MessageService", port, host)
        self.message_manager = message_manager or MessageManager(
            seed=Config.SEED_SAMPLE_DATA
        )
        self.token_service = token_service or create_token_service()

    def routers(self) -> list[APIRouter]:
        return [messages_router]

    def app_state(self) -> dict[str, Any]:
        return {
            "message_repository": self.message_manager,
            "token_service": self.token_service,
        }
