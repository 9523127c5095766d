"""Tests des endpoints d'évaluation de la robustesse des mots de passe."""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from fastapi_errors_rfc9457 import RFC9457Config, setup_rfc9457_handlers

from app.api.v1.endpoints.passwords import router


@pytest.fixture
def app():
    """Fixture pour une application FastAPI minimale pour tests."""
    test_app = FastAPI()
    config = RFC9457Config(
        base_url="about:blank",
        include_trace_id=True,
        expose_internal_errors=False,
        include_error_pages=False,  # Disable for tests
    )
    setup_rfc9457_handlers(test_app, config=config)
    test_app.include_router(router, prefix="/api/v1/passwords")
    return test_app


@pytest.fixture
def client(app):
    """Fixture pour le client de test FastAPI."""
    return TestClient(app)


class TestPasswordStrengthEndpoint:
    """Tests pour POST /passwords/strength."""

    def test_strong_password(self, client):
        response = client.post("/api/v1/passwords/strength", json={"password": "Str0ng!Passw0rd"})

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 100
        assert data["is_valid"] is True
        assert data["feedback"] == []
        assert data["level"] == {"label": "Strong", "color": "green"}

    def test_weak_password(self, client):
        response = client.post("/api/v1/passwords/strength", json={"password": "password123"})

        assert response.status_code == 200
        data = response.json()
        assert data["score"] == 25
        assert data["is_valid"] is False
        assert "Avoid common passwords and patterns" in data["feedback"]
        assert data["level"] == {"label": "Very Weak", "color": "red"}

    def test_empty_password(self, client):
        response = client.post("/api/v1/passwords/strength", json={"password": ""})

        assert response.status_code == 200
        assert response.json()["score"] == 0
        assert len(response.json()["feedback"]) == 5

    def test_password_not_echoed(self, client):
        response = client.post("/api/v1/passwords/strength", json={"password": "Secr3t#Value99"})

        assert "Secr3t#Value99" not in response.text

    def test_password_not_logged(self, client):
        with patch("app.services.password_strength.logger") as mock_logger:
            client.post("/api/v1/passwords/strength", json={"password": "Secr3t#Value99"})

        for call in mock_logger.method_calls:
            assert "Secr3t#Value99" not in str(call)

    def test_missing_password(self, client):
        response = client.post("/api/v1/passwords/strength", json={})

        assert response.status_code == 422
        assert response.headers["content-type"] == "application/problem+json"
