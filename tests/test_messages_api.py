def test_send_message(messages_client, auth_headers):
    res = messages_client.post(
        "/api/messages/send",
        headers=auth_headers,
        json={"to_user": "charlie", "content": "Hey Charlie"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["sent"] is True
    assert body["from_user"] == "alice"
    assert body["to_user"] == "charlie"
    assert body["message_id"].startswith("msg_")


def test_send_message_validation(messages_client, auth_headers):
    empty = messages_client.post(
        "/api/messages/send", headers=auth_headers, json={"to_user": "bob", "content": ""}
    )
    blank = messages_client.post(
        "/api/messages/send", headers=auth_headers, json={"to_user": "bob", "content": "  \n"}
    )
    too_long = messages_client.post(
        "/api/messages/send",
        headers=auth_headers,
        json={"to_user": "bob", "content": "x" * 1001},
    )
    missing = messages_client.post(
        "/api/messages/send", headers=auth_headers, json={"content": "hi"}
    )
    assert empty.status_code == 400
    assert blank.status_code == 400
    assert too_long.status_code == 400
    assert missing.status_code == 400
    assert missing.json()["message"] == "Missing required field: to_user"


def test_list_conversations(messages_client, auth_headers):
    res = messages_client.get("/api/conversations", headers=auth_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["total"] == 1
    conversation = body["conversations"][0]
    assert conversation["id"] == "conv_alice_bob"
    assert conversation["message_count"] == 3
    assert conversation["last_message"]["from"] == "alice"
    assert conversation["last_message"]["content"] == "That's wonderful to hear!"


def test_last_message_preview_is_truncated(messages_client, auth_headers):
    messages_client.post(
        "/api/messages/send",
        headers=auth_headers,
        json={"to_user": "charlie", "content": "y" * 80},
    )
    conversations = messages_client.get("/api/conversations", headers=auth_headers).json()[
        "conversations"
    ]
    latest = conversations[0]
    assert latest["id"] == "conv_alice_charlie"
    assert latest["last_message"]["content"] == "y" * 50 + "..."


def test_get_conversation_messages(messages_client, bob_headers):
    res = messages_client.get("/api/conversations/conv_alice_bob/messages", headers=bob_headers)
    assert res.status_code == 200
    body = res.json()
    assert body["conversation_id"] == "conv_alice_bob"
    assert body["total"] == 3
    assert [m["id"] for m in body["messages"]] == ["msg_1", "msg_2", "msg_3"]


def test_conversation_access_denied_for_non_participant(messages_client, charlie_headers):
    res = messages_client.get(
        "/api/conversations/conv_alice_bob/messages", headers=charlie_headers
    )
    assert res.status_code == 403


def test_unknown_conversation(messages_client, auth_headers):
    res = messages_client.get(
        "/api/conversations/conv_alice_zed/messages", headers=auth_headers
    )
    assert res.status_code == 404


def test_mark_read_only_by_recipient(messages_client, auth_headers, bob_headers):
    denied = messages_client.put("/api/messages/msg_3/read", headers=auth_headers)
    assert denied.status_code == 404
    assert denied.json()["message"] == "Message not found or access denied"

    res = messages_client.put("/api/messages/msg_3/read", headers=bob_headers)
    assert res.status_code == 200
    assert res.json() == {"message_id": "msg_3", "marked_as_read": True}


def test_delete_only_by_sender(messages_client, auth_headers, bob_headers):
    assert messages_client.delete("/api/messages/msg_1", headers=bob_headers).status_code == 404

    res = messages_client.delete("/api/messages/msg_1", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == {"message_id": "msg_1", "deleted": True}

    remaining = messages_client.get(
        "/api/conversations/conv_alice_bob/messages", headers=auth_headers
    ).json()
    assert remaining["total"] == 2


def test_underscored_usernames_do_not_share_conversations(messages_client, token_service):
    def headers(username):
        return {"Authorization": f"Bearer {token_service.issue(username)}"}

    messages_client.post(
        "/api/messages/send",
        headers=headers("abc_def"),
        json={"to_user": "ghi", "content": "private to ghi"},
    )
    messages_client.post(
        "/api/messages/send",
        headers=headers("abc"),
        json={"to_user": "def_ghi", "content": "hello def_ghi"},
    )

    seen_by_ghi = messages_client.get(
        "/api/conversations/conv_abc_def_ghi/messages", headers=headers("ghi")
    ).json()
    seen_by_abc = messages_client.get(
        "/api/conversations/conv_abc_def_ghi/messages", headers=headers("abc")
    ).json()
    assert [m["content"] for m in seen_by_ghi["messages"]] == ["private to ghi"]
    assert [m["content"] for m in seen_by_abc["messages"]] == ["hello def_ghi"]
