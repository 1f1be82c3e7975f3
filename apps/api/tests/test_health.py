"""Tests for the health endpoint."""
from fastapi.testclient import TestClient
from apps.api.main import app

client = TestClient(app)


def test_health_returns_200():
    response = client.get("/api/v1/health")
    assert response.status_code == 200


def test_health_returns_status_and_version():
    response = client.get("/api/v1/health")
    data = response.json()
    assert data["status"] == "healthy"
    assert "version" in data


def test_extraction_router_is_mounted():
    response = client.post("/api/v1/extraction/expense", json={"text": "R$ 10,00"})
    assert response.status_code == 200
    assert response.json()["expense"]["amount"] == 10.0
