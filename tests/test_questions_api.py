"""Tests for the question endpoints."""

import csv
import io

from fastapi.testclient import TestClient


def create(client: TestClient, **body) -> dict:
    body.setdefault("title", "Anti-venom availability")
    body.setdefault("division", "Pharma")
    response = client.post("/api/questions", json=body)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_list_seeds_on_first_read(client: TestClient):
    response = client.get("/api/questions")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [q["id"] for q in body["data"]["items"]] == ["q1", "q2", "q3"]
    assert body["data"]["next"] is None
    # camelCase on the wire
    assert body["data"]["items"][0]["ticketNumber"] == "LS-2024-0117"


def test_list_pagination_cursor(client: TestClient):
    first = client.get("/api/questions", params={"limit": 2}).json()["data"]
    assert [q["id"] for q in first["items"]] == ["q1", "q2"]

    second = client.get("/api/questions", params={"limit": 2, "cursor": first["next"]})
    data = second.json()["data"]
    assert [q["id"] for q in data["items"]] == ["q3"]
    assert data["next"] is None


def test_list_rejects_bad_cursor(client: TestClient):
    response = client.get("/api/questions", params={"cursor": "!!!"})
    assert response.status_code == 422
    assert response.json()["success"] is False


def test_list_filters(client: TestClient):
    response = client.get("/api/questions", params={"house": "rajya sabha"})
    assert [q["id"] for q in response.json()["data"]["items"]] == ["q2"]

    response = client.get("/api/questions", params={"status": "Draft"})
    assert [q["id"] for q in response.json()["data"]["items"]] == ["q3"]


def test_create_get_update_delete(client: TestClient):
    created = create(client, tags=["#Rural"], memberName="Shri R. Kumar")
    question_id = created["id"]
    assert created["status"] == "Draft"
    assert created["tags"] == ["rural"]
    assert created["memberName"] == "Shri R. Kumar"

    fetched = client.get(f"/api/questions/{question_id}").json()["data"]
    assert fetched == created

    patched = client.patch(
        f"/api/questions/{question_id}", json={"status": "Submitted", "answer": "Tabled"}
    ).json()["data"]
    assert patched["status"] == "Submitted"
    assert patched["answer"] == "Tabled"
    assert patched["title"] == created["title"]

    cleared = client.patch(f"/api/questions/{question_id}", json={"answer": None}).json()["data"]
    assert cleared["answer"] is None

    deleted = client.delete(f"/api/questions/{question_id}").json()["data"]
    assert deleted["deleted"] is True
    assert client.get(f"/api/questions/{question_id}").status_code == 404


def test_create_requires_title_and_division(client: TestClient):
    response = client.post("/api/questions", json={"title": "Only a title"})
    assert response.status_code == 422
    assert response.json() == {
        "success": False,
        "error": "Missing required fields: title and division",
    }


def test_create_rejects_unknown_status(client: TestClient):
    response = client.post(
        "/api/questions", json={"title": "T", "division": "Pharma", "status": "Pending"}
    )
    assert response.status_code == 422


def test_patch_missing_question(client: TestClient):
    response = client.patch("/api/questions/ghost", json={"title": "x"})
    assert response.status_code == 404


def test_bulk_status(client: TestClient):
    a = create(client)["id"]
    b = create(client)["id"]

    response = client.post(
        "/api/questions/bulk-status", json={"ids": [a, b, "missing"], "status": "Admitted"}
    )

    data = response.json()["data"]
    assert data["count"] == 3
    assert sorted(data["updated"]) == sorted([a, b])
    assert data["skipped"] == ["missing"]
    assert client.get(f"/api/questions/{a}").json()["data"]["status"] == "Admitted"
    assert client.get("/api/questions/missing").status_code == 404


def test_delete_cascades_attachments(client: TestClient):
    client.get("/api/questions")  # seed

    data = client.delete("/api/questions/q2").json()["data"]

    assert sorted(data["attachmentsDeleted"]) == ["a2", "a3"]
    assert client.get("/api/attachments/a2").status_code == 404
    assert client.get("/api/attachments/a1").status_code == 200


def test_comments(client: TestClient):
    question_id = create(client)["id"]

    comment = client.post(
        f"/api/questions/{question_id}/comments", json={"text": "Please expedite"}
    ).json()["data"]

    assert comment["author"] == "Admin User"
    stored = client.get(f"/api/questions/{question_id}").json()["data"]
    assert stored["comments"] == [comment]


def test_divisions(client: TestClient):
    data = client.get("/api/divisions").json()["data"]
    assert "Pharma" in data


def test_metrics(client: TestClient):
    data = client.get("/api/metrics", params={"includeTags": "true"}).json()["data"]
    assert data["totalQuestions"] == 3
    assert data["totalAttachments"] == 3
    assert len(data["byStatus"]) == 6
    assert len(data["topTags"]) == 5

    lok_sabha = client.get("/api/metrics", params={"house": "Lok Sabha"}).json()["data"]
    assert lok_sabha["totalQuestions"] == 2
    assert lok_sabha["topTags"] is None


def test_recent_activity(client: TestClient):
    data = client.get("/api/recent-activity").json()["data"]
    assert data[0]["id"] == "q3"
    assert {"id", "title", "status", "updatedAt", "ticketNumber", "tags"} <= set(data[0])


def test_tags(client: TestClient):
    client.get("/api/questions")
    data = client.get("/api/tags").json()["data"]
    assert data["tags"] == sorted(data["tags"])
    assert "vaccines" in data["tags"]


def test_export_csv(client: TestClient):
    client.get("/api/questions")
    text = client.get("/api/questions/export-csv").json()["data"]
    rows = list(csv.reader(io.StringIO(text)))
    assert rows[0][:3] == ["id", "ticketNumber", "memberName"]
    assert [row[0] for row in rows[1:]] == ["q1", "q2", "q3"]


def test_export_csv_empty_store(client: TestClient):
    assert client.get("/api/questions/export-csv").json()["data"] == ""
