"""
HTTP service base.

Owns a FastAPI app (built lazily from routers() and app_state()) and a
uvicorn server that runs on the service's worker thread.
"""

import logging
from abc import abstractmethod
from typing import Any, Optional

import uvicorn
from fastapi import APIRouter, FastAPI

from messenger.config.settings import Config
from messenger.presentation.app_factory import create_service_app
from messenger.services.service_base import ServiceBase

logger = logging.getLogger(__name__)


class HttpService(ServiceBase):
    def __init__(self, name: str, port: int, host: str = Config.HOST):
        super().__init__(name, port)
        self._host = host
        self._app: Optional[FastAPI] = None
        self._server: Optional[uvicorn.Server] = None

    @property
    def host(self) -> str:
        return self._host

    @property
    def app(self) -> FastAPI:
        """The service's FastAPI app; usable in-process before start()."""
        if self._app is None:
            self._app = create_service_app(
                service_name=self.name,
                port=self.port,
                routers=self.routers(),
                state=self.app_state(),
            )
        return self._app

    @property
    def is_serving(self) -> bool:
        return (
            self.is_running()
            and self._server is not None
            and self._server.started
        )

    @abstractmethod
    def routers(self) -> list[APIRouter]:
        """Service-specific routers."""

    @abstractmethod
    def app_state(self) -> dict[str, Any]:
        """Stores and services exposed to the dependencies via app.state."""

    def on_start(self) -> None:
        config = uvicorn.Config(
            self.app,
            host=self._host,
            port=self.port,
            log_config=None,
            access_log=False,
            lifespan="off",
            timeout_graceful_shutdown=5,
        )
        self._server = uvicorn.Server(config)

    def run_service(self) -> None:
        logger.info("%s listening on http://%s:%d", self.name, self._host, self.port)
        try:
            self._server.run()
        except SystemExit:
            # uvicorn exits the process when the socket cannot be bound
            logger.error(
                "Failed to start HTTP server on port %d for %s", self.port, self.name
            )
            self._mark_stopped()

    def on_stop(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
