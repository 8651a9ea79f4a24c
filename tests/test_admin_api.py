"""Tests for the seeding endpoints."""

from fastapi.testclient import TestClient


def test_seed_is_idempotent(client: TestClient, store):
    first = client.post("/api/admin/seed").json()["data"]
    assert first == {
        "seeded": True,
        "questions": True,
        "attachments": True,
        "users": True,
        "chats": True,
    }
    keys_after_first = sorted(store.keys())

    second = client.post("/api/admin/seed").json()["data"]
    assert second["questions"] is False
    assert sorted(store.keys()) == keys_after_first


def test_reseed_restores_seed_data(client: TestClient):
    created = client.post("/api/questions", json={"title": "Extra", "division": "Pharma"})
    extra_id = created.json()["data"]["id"]

    counts = client.post("/api/admin/reseed").json()["data"]

    assert counts == {"questions": 3, "attachments": 3, "users": 2, "chats": 1}
    assert client.get(f"/api/questions/{extra_id}").status_code == 404
    ids = [q["id"] for q in client.get("/api/questions").json()["data"]["items"]]
    assert ids == ["q1", "q2", "q3"]
