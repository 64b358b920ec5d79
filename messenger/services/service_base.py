"""
Service lifecycle base.

start():  not running -> running, on_start(), then run_service() on a worker thread
stop():   running -> not running, on_stop(), then join the worker thread

Calling start() on a running service (or stop() on a stopped one) logs a
warning and does nothing.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)


class ServiceBase(ABC):
    def __init__(self, name: str, port: int):
        self._name = name
        self._port = port
        self._running = threading.Event()
        self._lock = threading.Lock()
        self._thread: Optional[threading.Thread] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def port(self) -> int:
        return self._port

    def is_running(self) -> bool:
        return self._running.is_set()

    def start(self) -> None:
        with self._lock:
            if self._running.is_set():
                logger.warning("Service %s is already running", self._name)
                return

            logger.info("Starting service %s on port %d", self._name, self._port)
            self._running.set()
            try:
                self.on_start()
            except Exception:
                self._running.clear()
                raise
            self._thread = threading.Thread(
                target=self.run_service, name=f"{self._name}-worker", daemon=True
            )
            self._thread.start()

    def stop(self) -> None:
        with self._lock:
            if not self._running.is_set():
                logger.warning("Service %s is not running", self._name)
                return

            logger.info("Stopping service %s", self._name)
            self._running.clear()
            self.on_stop()
            thread, self._thread = self._thread, None

        if thread is not None and thread is not threading.current_thread():
            thread.join()
        logger.info("Service %s stopped", self._name)

    def _mark_stopped(self) -> None:
        """Called from the worker when it exits on its own."""
        self._running.clear()

    @abstractmethod
    def on_start(self) -> None:
        """Prepare resources before the worker thread starts."""

    @abstractmethod
    def on_stop(self) -> None:
        """Signal the worker (and any helper threads) to finish."""

    @abstractmethod
    def run_service(self) -> None:
        """Worker thread body."""
