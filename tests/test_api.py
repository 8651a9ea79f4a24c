"""Tests for API functionality."""

from fastapi.testclient import TestClient


def test_api_docs_available(client: TestClient):
    """Test that API documentation is available."""
    response = client.get("/docs")
    assert response.status_code == 200


def test_redoc_available(client: TestClient):
    """Test that ReDoc documentation is available."""
    response = client.get("/redoc")
    assert response.status_code == 200


def test_openapi_schema_available(client: TestClient):
    """Test that OpenAPI schema is available."""
    response = client.get("/openapi.json")
    assert response.status_code == 200
    schema = response.json()
    assert schema["info"]["title"] == "SwasthyaQ API"
    assert "/api/questions" in schema["paths"]


def test_cors_headers_present(client: TestClient):
    """Test that CORS headers are present in responses when Origin is set."""
    response = client.get("/api/health", headers={"Origin": "http://localhost:3000"})
    assert response.status_code == 200
    assert "access-control-allow-origin" in response.headers


def test_security_headers_present(client: TestClient):
    """Test that security headers are present."""
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.headers["x-content-type-options"] == "nosniff"
    assert response.headers["x-frame-options"] == "DENY"
    assert response.headers["cache-control"] == "no-store"


def test_invalid_endpoint_returns_404(client: TestClient):
    """Test that invalid endpoints return 404 in the error envelope."""
    response = client.get("/api/nonexistent")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Not Found"}


def test_wrong_method_keeps_allow_header(client: TestClient):
    """Test that 405 responses use the envelope and keep the Allow header."""
    response = client.put("/api/health")
    assert response.status_code == 405
    assert response.json()["success"] is False
    assert "GET" in response.headers["allow"]


def test_storage_errors_use_error_envelope(client: TestClient):
    """Test that storage errors map to status codes with the error envelope."""
    response = client.get("/api/questions/ghost")
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "question 'ghost' not found"}


def test_corrupt_record_maps_to_503(client: TestClient, store):
    """Test that an undecodable stored value surfaces as a substrate failure."""
    client.portal.call(store.put, "question/bad", "{not json")
    response = client.get("/api/questions/bad")
    assert response.status_code == 503
    assert response.json()["success"] is False
