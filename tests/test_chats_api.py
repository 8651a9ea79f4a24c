"""Tests for the user and chat board endpoints."""

from fastapi.testclient import TestClient


def test_users_are_seeded(client: TestClient):
    data = client.get("/api/users").json()["data"]
    assert [u["name"] for u in data["items"]] == ["Admin User", "Ministry Staff"]


def test_users_pagination(client: TestClient):
    first = client.get("/api/users", params={"limit": 1}).json()["data"]
    second = client.get("/api/users", params={"limit": 1, "cursor": first["next"]}).json()["data"]
    assert [u["id"] for u in first["items"] + second["items"]] == ["u1", "u2"]
    assert second["next"] is None


def test_chat_flow(client: TestClient):
    chats = client.get("/api/chats").json()["data"]["items"]
    assert chats[0]["messages"][0]["text"] == "Hello"

    board = client.post("/api/chats", json={"title": "Budget session"}).json()["data"]
    sent = client.post(
        f"/api/chats/{board['id']}/messages", json={"userId": "u1", "text": "Agenda?"}
    ).json()["data"]

    assert sent["chatId"] == board["id"]
    messages = client.get(f"/api/chats/{board['id']}/messages").json()["data"]
    assert messages == [sent]


def test_create_chat_requires_title(client: TestClient):
    assert client.post("/api/chats", json={"title": ""}).status_code == 422


def test_message_validation(client: TestClient):
    client.get("/api/chats")
    response = client.post("/api/chats/c1/messages", json={"userId": "u1", "text": "  "})
    assert response.status_code == 422


def test_messages_of_missing_chat(client: TestClient):
    response = client.get("/api/chats/nowhere/messages")
    assert response.status_code == 404
