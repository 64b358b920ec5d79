import pytest
from fastapi.testclient import TestClient

from messenger.infrastructure.persistence import (
    ConnectionManager,
    MessageManager,
    UserManager,
)
from messenger.infrastructure.push import LoggingPushGateway
from messenger.infrastructure.security import DemoTokenService
from messenger.services import (
    AuthService,
    MessageService,
    UserService,
    WebSocketService,
)


class FakeClock:
    """Manually advanced clock for time-dependent store tests."""

    def __init__(self, now: float = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def token_service():
    return DemoTokenService()


@pytest.fixture()
def user_manager():
    return UserManager(seed=True)


@pytest.fixture()
def message_manager():
    return MessageManager(seed=True)


@pytest.fixture()
def connection_manager():
    return ConnectionManager()


@pytest.fixture()
def auth_service(user_manager, token_service):
    return AuthService(user_manager=user_manager, token_service=token_service)


@pytest.fixture()
def user_service(user_manager, token_service):
    return UserService(user_manager=user_manager, token_service=token_service)


@pytest.fixture()
def message_service(message_manager, token_service):
    return MessageService(message_manager=message_manager, token_service=token_service)


@pytest.fixture()
def websocket_service(connection_manager, token_service):
    return WebSocketService(
        connection_manager=connection_manager,
        push_gateway=LoggingPushGateway(),
        token_service=token_service,
    )


@pytest.fixture()
def auth_client(auth_service):
    return TestClient(auth_service.app)


@pytest.fixture()
def users_client(user_service):
    return TestClient(user_service.app)


@pytest.fixture()
def messages_client(message_service):
    return TestClient(message_service.app)


@pytest.fixture()
def websocket_client(websocket_service):
    return TestClient(websocket_service.app)


def bearer(token_service, username):
    return {"Authorization": f"Bearer {token_service.issue(username)}"}


@pytest.fixture()
def auth_headers(token_service):
    """Authentication headers for the seeded user alice."""
    return bearer(token_service, "alice")


@pytest.fixture()
def bob_headers(token_service):
    return bearer(token_service, "bob")


@pytest.fixture()
def charlie_headers(token_service):
    return bearer(token_service, "charlie")
