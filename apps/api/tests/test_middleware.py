"""Tests for CORS origin handling."""

import pytest
from fastapi.testclient import TestClient
from registry_api.middleware import get_allowed_origins, get_cors_headers


@pytest.mark.unit
def test_ui_url_allowed_over_both_schemes() -> None:
    origins = get_allowed_origins("https://registry.example.com/", environment="production")

    assert origins == ["https://registry.example.com", "http://registry.example.com"]


@pytest.mark.unit
def test_dev_origins_added_in_development() -> None:
    origins = get_allowed_origins("http://localhost:5173", environment="development")

    assert "http://127.0.0.1:3000" in origins
    assert origins.count("http://localhost:5173") == 1


@pytest.mark.unit
def test_cors_headers_only_for_allowed_origin() -> None:
    assert get_cors_headers(None) == {}
    assert get_cors_headers("http://evil.example.com", environment="production") == {}
    headers = get_cors_headers("http://localhost:3000")
    assert headers["Access-Control-Allow-Origin"] == "http://localhost:3000"


@pytest.mark.unit
def test_preflight_from_ui(client: TestClient) -> None:
    response = client.options(
        "/api/users/",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
