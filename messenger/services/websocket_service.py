"""
Connection registry service.

Besides serving /api/websocket/*, runs a sweep thread that drops
connections idle for longer than CONNECTION_IDLE_TIMEOUT every
CONNECTION_SWEEP_INTERVAL seconds.
"""

import logging
import threading
from typing import Any, Optional

from fastapi import APIRouter

from messenger.config.settings import Config
from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.ports.token_service import TokenService
from messenger.infrastructure.persistence import ConnectionManager
from messenger.infrastructure.push import LoggingPushGateway
from messenger.infrastructure.security import create_token_service
from messenger.observability.metrics import (
    increment_connections_swept,
    set_active_connections,
)
from messenger.presentation.api import websocket_router
from messenger.services.http_service import HttpService

logger = logging.getLogger(__name__)


class WebSocketService(HttpService):
    def __init__(
        self,
        port: int = Config.WEBSOCKET_SERVICE_PORT,
        connection_manager: Optional[ConnectionManager] = None,
        push_gateway: Optional[PushGateway] = None,
        token_service: Optional[TokenService] = None,
        host: str = Config.HOST,
        sweep_interval: float = Config.CONNECTION_SWEEP_INTERVAL,
    ):
        super().__init__("WebSocketService", port, host)
        self.connection_manager = connection_manager or ConnectionManager()
        self.push_gateway = push_gateway or LoggingPushGateway()
        self.token_service = token_service or create_token_service()
        self._sweep_interval = sweep_interval
        self._sweep_stop = threading.Event()
        self._sweep_thread: Optional[threading.Thread] = None

    def routers(self) -> list[APIRouter]:
        return [websocket_router]

    def app_state(self) -> dict[str, Any]:
        return {
            "connection_repository": self.connection_manager,
            "push_gateway": self.push_gateway,
            "token_service": self.token_service,
        }

    def sweep_once(self) -> int:
        removed = self.connection_manager.sweep_inactive()
        if removed:
            increment_connections_swept(removed)
        set_active_connections(self.connection_manager.total_connections())
        return removed

    def on_start(self) -> None:
        super().on_start()
        self._sweep_stop.clear()
        self._sweep_thread = threading.Thread(
            target=self._sweep_loop, name=f"{self.name}-sweep", daemon=True
        )
        self._sweep_thread.start()

    def on_stop(self) -> None:
        super().on_stop()
        self._sweep_stop.set()
        if self._sweep_thread is not None:
            self._sweep_thread.join()
            self._sweep_thread = None

    def _sweep_loop(self) -> None:
        logger.info(
            "Connection sweep started (every %.1fs, idle timeout %ds)",
            self._sweep_interval,
            self.connection_manager.idle_timeout,
        )
        while not self._sweep_stop.wait(self._sweep_interval):
            try:
                self.sweep_once()
            except Exception:
                logger.exception("Connection sweep failed")
        logger.info("Connection sweep stopped")
