import pytest

from messenger.application.commands.auth import (
    LoginCommand,
    LoginHandler,
    RefreshTokenCommand,
    RefreshTokenHandler,
)
from messenger.application.commands.connections import (
    ConnectUserCommand,
    ConnectUserHandler,
    DisconnectCommand,
    DisconnectHandler,
)
from messenger.application.dto.message import LastMessagePreviewDTO
from messenger.domain.entities.message import Message
from messenger.domain.exceptions import AuthenticationError, DomainValidationError
from messenger.domain.ports.push_gateway import PushGateway
from messenger.domain.value_objects.conversation_id import ConversationId
from messenger.domain.value_objects.user_email import UserEmail
from messenger.domain.value_objects.username import Username


class RecordingPushGateway(PushGateway):
    def __init__(self):
        self.direct = []
        self.broadcasts = []

    def send_to_user(self, user_id, payload):
        self.direct.append((user_id, payload))

    def broadcast(self, user_ids, payload):
        self.broadcasts.append((list(user_ids), payload))
        return len(user_ids)


@pytest.mark.parametrize("value", ["ab", "a" * 51, "has space", "dash-name"])
def test_username_rejects_invalid(value):
    with pytest.raises(ValueError):
        Username(value)


def test_username_and_email_accept_valid():
    assert Username("dave_99").value == "dave_99"
    assert UserEmail("dave@example.com").value == "dave@example.com"


def test_email_rejects_invalid():
    with pytest.raises(ValueError, match="Invalid email format"):
        UserEmail("dave@")


def test_conversation_id_cannot_be_empty():
    with pytest.raises(ValueError):
        ConversationId("")


def test_preview_keeps_short_content():
    message = Message("msg_1", "alice", "bob", "short", 1)
    assert LastMessagePreviewDTO.from_entity(message).content == "short"


def test_login_handler(token_service):
    handler = LoginHandler(token_service)
    result = handler.execute(LoginCommand(username="erin", password="pass"))
    assert result.username == "erin"
    with pytest.raises(AuthenticationError):
        handler.execute(LoginCommand(username="", password="password"))


def test_refresh_handler_rejects_token_without_username(token_service):
    handler = RefreshTokenHandler(token_service)
    with pytest.raises(AuthenticationError, match="Could not extract username"):
        handler.execute(RefreshTokenCommand(refresh_token="jwt_nodelimiter"))


def test_connect_broadcasts_online_status(connection_manager):
    gateway = RecordingPushGateway()
    connection_manager.add("bob")

    result = ConnectUserHandler(connection_manager, gateway).execute(
        ConnectUserCommand(user_id="alice")
    )

    assert result.user_id == "alice"
    recipients, payload = gateway.broadcasts[-1]
    assert recipients == ["alice", "bob"]
    assert payload["type"] == "user_status_change"
    assert payload["user_id"] == "alice"
    assert payload["is_online"] is True


def test_connect_requires_user_id(connection_manager):
    with pytest.raises(DomainValidationError):
        ConnectUserHandler(connection_manager, RecordingPushGateway()).execute(
            ConnectUserCommand(user_id="")
        )


def test_disconnect_by_user_broadcasts_offline(connection_manager):
    gateway = RecordingPushGateway()
    connection_manager.add("alice")
    connection_manager.add("bob")

    DisconnectHandler(connection_manager, gateway).execute(DisconnectCommand(user_id="alice"))

    recipients, payload = gateway.broadcasts[-1]
    assert recipients == ["bob"]
    assert payload["is_online"] is False


def test_disconnect_by_connection_does_not_notify(connection_manager):
    gateway = RecordingPushGateway()
    connection_id = connection_manager.add("alice")

    DisconnectHandler(connection_manager, gateway).execute(
        DisconnectCommand(connection_id=connection_id)
    )

    assert gateway.broadcasts == []
