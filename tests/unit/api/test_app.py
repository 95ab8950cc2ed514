"""Tests for application-wide behaviour: CORS, error handlers, middleware."""

from unittest.mock import Mock

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from src.specials_api.api.http.app import create_app
from src.specials_api.api.http.deps import get_user_service
from src.specials_api.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    CORSConfig,
)


def test_cors_allows_any_origin(client: TestClient, mock_user_service: Mock):
    mock_user_service.get_all_users.return_value = []

    response = client.get("/api/v1/users", headers={"Origin": "http://example.com"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight(client: TestClient):
    response = client.options(
        "/api/v1/specials",
        headers={
            "Origin": "http://example.com",
            "Access-Control-Request-Method": "POST",
        },
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.headers["access-control-allow-origin"] == "*"


def test_request_id_header(client: TestClient):
    response = client.get("/api/v1/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_generated(client: TestClient):
    assert client.get("/api/v1/health").headers["X-Request-ID"]


def test_unknown_route_is_404(client: TestClient):
    assert client.get("/api/v1/nothing-here").status_code == status.HTTP_404_NOT_FOUND


def test_malformed_json_body(client: TestClient, mock_user_service: Mock):
    response = client.post(
        "/api/v1/users",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Invalid request body"}
    mock_user_service.create_user.assert_not_called()


def test_wrongly_typed_field(client: TestClient, mock_user_service: Mock):
    response = client.post("/api/v1/users", json={"email": ["a", "b"]})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Invalid request body"}


def test_escaped_exception_becomes_500(api_app: FastAPI):
    def broken_service():
        raise RuntimeError("dependency exploded")

    api_app.dependency_overrides[get_user_service] = broken_service
    client = TestClient(api_app)

    response = client.get("/api/v1/users", headers={"X-Request-ID": "req-500"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {
        "error": "Internal Server Error",
        "request_id": "req-500",
    }


def test_production_refuses_wildcard_credentials():
    config = ConfigData(
        app=AppConfig(
            environment="production",
            cors=CORSConfig(origins=["*"], allow_credentials=True),
        )
    )

    with pytest.raises(RuntimeError, match="CORS misconfigured"):
        create_app(config)


def test_docs_hidden_in_production():
    app = create_app(ConfigData(app=AppConfig(environment="production")))

    assert app.docs_url is None
