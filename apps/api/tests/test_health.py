"""Tests for the health check endpoint."""

import pytest
from fastapi.testclient import TestClient
from registry_api.config import Settings
from registry_api.main import create_app


@pytest.mark.unit
def test_health_check(client: TestClient) -> None:
    """Test the health check endpoint returns 200."""
    response = client.get("/api/health")
    assert response.status_code == 200


@pytest.mark.unit
def test_health_check_response_schema(client: TestClient) -> None:
    """Test the health check endpoint response has correct schema."""
    data = client.get("/api/health").json()

    assert data["status"] == "ok"
    assert data["version"] == "1.0"
    assert data["environment"] == "test"
    assert data["registered_users"] == 3
    assert data["message"] == "API is healthy"


@pytest.mark.unit
def test_health_check_tracks_registry_size(client: TestClient) -> None:
    client.delete("/api/users/1")

    assert client.get("/api/health").json()["registered_users"] == 2


@pytest.mark.unit
def test_health_check_uses_settings_given_to_app() -> None:
    settings = Settings(_env_file=None, environment="staging", app_version="2.5")
    app = create_app(settings)

    data = TestClient(app).get("/api/health").json()

    assert app.state.settings is settings
    assert app.dependency_overrides == {}
    assert data["environment"] == "staging"
    assert data["version"] == "2.5"
