"""Tests for the health endpoints."""

from unittest.mock import patch

from fastapi.testclient import TestClient

from src.bookstore.core.services import DbSessionService


def test_liveness(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "bookstore"}


def test_readiness_with_reachable_database(client: TestClient):
    response = client.get("/health/ready")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ready"
    assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}


def test_readiness_with_unreachable_database(client: TestClient):
    with patch.object(DbSessionService, "health_check", return_value=False):
        response = client.get("/health/ready")
    assert response.status_code == 503
    assert response.json()["checks"]["database"]["status"] == "unhealthy"
