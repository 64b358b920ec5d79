def test_login_returns_bearer_token(auth_client):
    res = auth_client.post("/api/auth/login", json={"username": "alice", "password": "secret"})
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == "alice"
    assert body["token_type"] == "Bearer"
    assert body["expires_in"] == 3600
    assert body["access_token"].startswith("jwt_alice_")


def test_login_with_short_password_is_unauthorized(auth_client):
    res = auth_client.post("/api/auth/login", json={"username": "alice", "password": "abc"})
    assert res.status_code == 401
    assert res.json() == {"error": True, "message": "Invalid credentials", "status": 401}


def test_login_missing_field(auth_client):
    res = auth_client.post("/api/auth/login", json={"username": "alice"})
    assert res.status_code == 400
    assert res.json()["message"] == "Missing required field: password"


def test_login_malformed_json(auth_client):
    res = auth_client.post(
        "/api/auth/login",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"].startswith("Invalid JSON format")


def test_login_empty_body(auth_client):
    res = auth_client.post("/api/auth/login")
    assert res.status_code == 400
    assert res.json()["message"] == "Request body is empty"


def test_register_creates_user(auth_client, user_manager):
    res = auth_client.post(
        "/api/auth/register",
        json={"username": "dave", "password": "hunter2", "email": "dave@example.com"},
    )
    assert res.status_code == 201
    body = res.json()
    assert "dave" in body["access_token"]
    assert body["email"] == "dave@example.com"
    assert body["created"] is True
    assert user_manager.exists("dave")


def test_register_duplicate_username_conflicts(auth_client):
    res = auth_client.post(
        "/api/auth/register",
        json={"username": "alice", "password": "hunter2", "email": "a@example.com"},
    )
    assert res.status_code == 409
    assert res.json()["message"] == "Username already exists"


def test_register_rejects_invalid_input(auth_client):
    bad_username = auth_client.post(
        "/api/auth/register",
        json={"username": "da", "password": "hunter2", "email": "dave@example.com"},
    )
    bad_email = auth_client.post(
        "/api/auth/register",
        json={"username": "dave", "password": "hunter2", "email": "not-an-email"},
    )
    short_password = auth_client.post(
        "/api/auth/register",
        json={"username": "dave", "password": "abc", "email": "dave@example.com"},
    )
    assert bad_username.status_code == 400
    assert bad_email.status_code == 400
    assert bad_email.json()["message"] == "Invalid email format"
    assert short_password.status_code == 400


def test_verify_token(auth_client, auth_headers):
    res = auth_client.post("/api/auth/verify", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"valid": True, "username": "alice", "message": "Token is valid"}


def test_verify_requires_bearer(auth_client):
    assert auth_client.post("/api/auth/verify").status_code == 401
    res = auth_client.post("/api/auth/verify", headers={"Authorization": "Bearer nope"})
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid or expired token"


def test_refresh_issues_token_for_same_user(auth_client, token_service):
    refresh = token_service.issue("bob")
    res = auth_client.post("/api/auth/refresh", json={"refresh_token": refresh})
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"access_token", "token_type", "expires_in"}
    assert token_service.extract_username(body["access_token"]) == "bob"


def test_refresh_rejects_invalid_token(auth_client):
    res = auth_client.post("/api/auth/refresh", json={"refresh_token": "garbage"})
    assert res.status_code == 401


def test_logout(auth_client):
    res = auth_client.post("/api/auth/logout")
    assert res.json() == {"message": "Logout successful"}
