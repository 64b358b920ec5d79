import pytest


@pytest.mark.parametrize(
    "client_fixture, service_name, port",
    [
        ("auth_client", "AuthService", 8001),
        ("users_client", "UserService", 8002),
        ("messages_client", "MessageService", 8003),
        ("websocket_client", "WebSocketService", 8004),
    ],
)
def test_health(request, client_fixture, service_name, port):
    client = request.getfixturevalue(client_fixture)
    res = client.get("/health")
    assert res.status_code == 200
    body = res.json()
    assert body["service"] == service_name
    assert body["status"] == "healthy"
    assert body["port"] == port
    assert isinstance(body["timestamp"], int)


def test_responses_are_indented(auth_client):
    res = auth_client.post("/api/auth/logout")
    assert res.text == '{\n  "message": "Logout successful"\n}'


def test_correlation_id_is_echoed(auth_client):
    res = auth_client.get("/health", headers={"X-Correlation-ID": "abc-123"})
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_unknown_route_uses_error_envelope(auth_client):
    res = auth_client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json() == {"error": True, "message": "Not Found", "status": 404}


def test_metrics_endpoint(messages_client, auth_headers):
    messages_client.post(
        "/api/messages/send", headers=auth_headers, json={"to_user": "bob", "content": "hi"}
    )
    res = messages_client.get("/metrics")
    assert res.status_code == 200
    assert "messenger_messages_sent_total" in res.text


def test_debug_flag_reaches_app(monkeypatch, token_service):
    from messenger.config.settings import Config
    from messenger.services import AuthService

    monkeypatch.setattr(Config, "DEBUG", True)
    assert AuthService(token_service=token_service).app.debug is True

    monkeypatch.setattr(Config, "DEBUG", False)
    assert AuthService(token_service=token_service).app.debug is False
