import logging
import threading

from messenger.services import ServiceBase


class RecordingService(ServiceBase):
    """Worker blocks until stop() releases it."""

    def __init__(self):
        super().__init__("RecordingService", 9999)
        self.calls = []
        self.release = threading.Event()
        self.worker_started = threading.Event()

    def on_start(self):
        self.calls.append("on_start")

    def on_stop(self):
        self.calls.append("on_stop")
        self.release.set()

    def run_service(self):
        self.worker_started.set()
        self.release.wait(timeout=5)
        self.calls.append("run_service_done")


def test_accessors():
    service = RecordingService()
    assert service.name == "RecordingService"
    assert service.port == 9999
    assert service.is_running() is False


def test_start_then_stop_runs_hooks_in_order():
    service = RecordingService()
    service.start()
    assert service.is_running()
    assert service.worker_started.wait(timeout=2)

    service.stop()
    assert service.is_running() is False
    assert service.calls == ["on_start", "on_stop", "run_service_done"]


def test_double_start_warns_and_is_noop(caplog):
    service = RecordingService()
    service.start()
    try:
        with caplog.at_level(logging.WARNING, logger="messenger.services.service_base"):
            service.start()
        assert "already running" in caplog.text
        assert service.calls.count("on_start") == 1
    finally:
        service.stop()


def test_stop_when_stopped_warns(caplog):
    service = RecordingService()
    with caplog.at_level(logging.WARNING, logger="messenger.services.service_base"):
        service.stop()
    assert "not running" in caplog.text
    assert service.calls == []


def test_service_can_restart():
    service = RecordingService()
    service.start()
    service.stop()
    service.release.clear()
    service.start()
    assert service.is_running()
    service.stop()
    assert service.calls.count("on_start") == 2
