"""Tests for the attachment endpoints."""

from fastapi.testclient import TestClient


def test_list_by_question(client: TestClient):
    client.get("/api/questions")  # seed

    response = client.get("/api/attachments", params={"questionId": "q2"})

    data = response.json()["data"]
    assert sorted(a["id"] for a in data) == ["a2", "a3"]
    assert data[0]["downloadUrl"].startswith("https://")


def test_create_links_and_delete_unlinks(client: TestClient):
    client.get("/api/questions")

    created = client.post(
        "/api/attachments",
        json={
            "questionId": "q3",
            "filename": "brief.pdf",
            "size": 2048,
            "mimeType": "application/pdf",
        },
    ).json()["data"]

    assert created["label"] == "brief.pdf"
    question = client.get("/api/questions/q3").json()["data"]
    assert question["attachmentIds"] == [created["id"]]

    fetched = client.get(f"/api/attachments/{created['id']}").json()["data"]
    assert fetched["downloadUrl"] == f"/api/attachments/{created['id']}/download"

    assert client.delete(f"/api/attachments/{created['id']}").json()["data"] == {"deleted": True}
    assert client.get("/api/questions/q3").json()["data"]["attachmentIds"] == []


def test_create_requires_question_id(client: TestClient):
    response = client.post("/api/attachments", json={"label": "orphan"})
    assert response.status_code == 422
    assert response.json()["error"] == "questionId required"


def test_get_missing_attachment(client: TestClient):
    response = client.get("/api/attachments/nope")
    assert response.status_code == 404
    assert response.json()["success"] is False


def test_rejects_negative_size(client: TestClient):
    response = client.post("/api/attachments", json={"questionId": "q1", "size": -1})
    assert response.status_code == 422


def test_download_url_serves_generated_file(client: TestClient):
    created = client.post(
        "/api/attachments",
        json={"questionId": "q1", "filename": "memo.pdf", "mimeType": "application/pdf"},
    ).json()["data"]
    view = client.get(f"/api/attachments/{created['id']}").json()["data"]

    response = client.get(view["downloadUrl"])

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["x-mock-download"] == "true"
    assert response.headers["content-disposition"] == 'attachment; filename="memo.pdf"'
    assert response.content.startswith(b"%PDF-1.4")


def test_download_redirects_to_folder_path(client: TestClient):
    client.get("/api/questions")  # seed

    response = client.get("/api/attachments/a1/download", follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com/shared-drive/logistics/q2-report"


def test_download_missing_attachment(client: TestClient):
    response = client.get("/api/attachments/nope/download")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "attachment 'nope' not found"}
