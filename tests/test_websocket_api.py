def test_connect_uses_token_user_by_default(websocket_client, auth_headers, connection_manager):
    res = websocket_client.post("/api/websocket/connect", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["user_id"] == "alice"
    assert body["connected"] is True
    assert body["connection_id"].startswith("conn_1_")
    assert connection_manager.is_user_online("alice")


def test_connect_prefers_query_then_body(websocket_client, auth_headers):
    from_query = websocket_client.post(
        "/api/websocket/connect",
        params={"user_id": "bob"},
        json={"user_id": "charlie"},
        headers=auth_headers,
    )
    from_body = websocket_client.post(
        "/api/websocket/connect", json={"user_id": "charlie"}, headers=auth_headers
    )
    assert from_query.json()["user_id"] == "bob"
    assert from_body.json()["user_id"] == "charlie"


def test_stats_and_online(websocket_client, auth_headers, connection_manager):
    connection_manager.add("bob")
    connection_manager.add("bob")
    connection_manager.add("charlie")

    stats = websocket_client.get("/api/websocket/stats", headers=auth_headers).json()
    assert stats["total_connections"] == 3
    assert stats["active_users"] == 2

    online = websocket_client.get("/api/websocket/online", headers=auth_headers).json()
    assert online["online_users"] == ["bob", "charlie"]
    assert online["count"] == 2


def test_registry_requires_auth(websocket_client):
    assert websocket_client.get("/api/websocket/stats").status_code == 401


def test_send_direct_reports_recipient_presence(
    websocket_client, auth_headers, connection_manager
):
    offline = websocket_client.post(
        "/api/websocket/send",
        headers=auth_headers,
        json={"to_user": "bob", "message": "ping"},
    ).json()
    assert offline == {"sent": True, "to": "bob", "message": "ping", "recipient_online": False}

    connection_manager.add("bob")
    online = websocket_client.post(
        "/api/websocket/send",
        headers=auth_headers,
        json={"to_user": "bob", "message": "ping"},
    ).json()
    assert online["recipient_online"] is True


def test_send_direct_rejects_empty_message(websocket_client, auth_headers):
    res = websocket_client.post(
        "/api/websocket/send", headers=auth_headers, json={"to_user": "bob", "message": ""}
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Message cannot be empty"


def test_broadcast_counts_online_users(websocket_client, auth_headers, connection_manager):
    connection_manager.add("bob")
    connection_manager.add("charlie")
    res = websocket_client.post(
        "/api/websocket/broadcast", headers=auth_headers, json={"message": "hello all"}
    )
    assert res.status_code == 200
    assert res.json() == {"broadcast": True, "message": "hello all", "sent_to": 2}


def test_disconnect_by_connection_id(websocket_client, auth_headers, connection_manager):
    connection_id = connection_manager.add("bob")
    res = websocket_client.post(
        "/api/websocket/disconnect",
        params={"connection_id": connection_id},
        headers=auth_headers,
    )
    assert res.status_code == 200
    assert res.json() == {"disconnected": True, "connection_id": connection_id}
    assert not connection_manager.is_user_online("bob")


def test_disconnect_by_user_with_delete(websocket_client, auth_headers, connection_manager):
    connection_manager.add("bob")
    connection_manager.add("bob")
    res = websocket_client.delete(
        "/api/websocket/disconnect", params={"user_id": "bob"}, headers=auth_headers
    )
    assert res.status_code == 200
    assert res.json() == {"disconnected": True, "user_id": "bob"}
    assert connection_manager.total_connections() == 0


def test_disconnect_errors(websocket_client, auth_headers):
    missing_params = websocket_client.post("/api/websocket/disconnect", headers=auth_headers)
    unknown_conn = websocket_client.post(
        "/api/websocket/disconnect", params={"connection_id": "conn_x"}, headers=auth_headers
    )
    unknown_user = websocket_client.post(
        "/api/websocket/disconnect", params={"user_id": "ghost"}, headers=auth_headers
    )
    assert missing_params.status_code == 400
    assert unknown_conn.status_code == 404
    assert unknown_conn.json()["message"] == "Connection not found"
    assert unknown_user.status_code == 404
    assert unknown_user.json()["message"] == "User not found"


def test_heartbeat(websocket_client, auth_headers, connection_manager):
    connection_id = connection_manager.add("alice")
    res = websocket_client.post(
        "/api/websocket/heartbeat", params={"connection_id": connection_id}, headers=auth_headers
    )
    assert res.status_code == 200
    assert res.json()["alive"] is True

    res = websocket_client.post(
        "/api/websocket/heartbeat", params={"connection_id": "conn_x"}, headers=auth_headers
    )
    assert res.status_code == 404


def test_sweep_once_drops_idle_connections(clock, token_service):
    from messenger.infrastructure.persistence import ConnectionManager
    from messenger.services import WebSocketService

    manager = ConnectionManager(idle_timeout=300, clock=clock)
    service = WebSocketService(connection_manager=manager, token_service=token_service)
    manager.add("alice")
    clock.advance(301)

    assert service.sweep_once() == 1
    assert manager.online_users() == []
