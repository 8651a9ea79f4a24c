"""Tests for health check endpoint."""

from fastapi.testclient import TestClient


def test_health_check(client: TestClient):
    """Test the health endpoint."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["storage_backend"] == "memory"


def test_health_check_response_schema(client: TestClient):
    """Test that the health response matches the expected schema."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()

    assert set(data) == {"status", "version", "environment", "storage_backend"}
    assert all(isinstance(value, str) for value in data.values())


def test_health_check_returns_correct_version(client: TestClient):
    """Test that health check returns the correct version."""
    response = client.get("/api/health")
    assert response.json()["version"] == "0.1.0"


def test_health_does_not_touch_storage(client: TestClient, store):
    """Test that health checks leave the store empty."""
    client.get("/api/health")
    assert len(store) == 0
