"""
Tests for Settings and the app factory wiring.
"""

from fastapi.testclient import TestClient

from travel_backend.config import DEFAULT_GROQ_API_URL, DEFAULT_GROQ_MODEL, Settings
from travel_backend.main import create_app
from travel_backend.services.completion_client import GroqCompletionClient


class TestSettings:
    """Tests for environment-backed Settings."""

    def test_defaults(self, monkeypatch):
        for name in [
            "GROQ_API_KEY", "GROQ_API_URL", "GROQ_MODEL", "GROQ_TEMPERATURE",
            "GROQ_MAX_TOKENS", "PORT", "HOST", "ENVIRONMENT", "CORS_ALLOW_ORIGIN",
        ]:
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.GROQ_API_KEY == ""
        assert settings.GROQ_API_URL == DEFAULT_GROQ_API_URL
        assert settings.GROQ_MODEL == DEFAULT_GROQ_MODEL
        assert settings.GROQ_TEMPERATURE == 0.7
        assert settings.GROQ_MAX_TOKENS == 2048
        assert settings.PORT == 8080
        assert settings.CORS_ALLOW_ORIGIN == "*"
        assert settings.is_development()

    def test_port_from_environment(self, monkeypatch):
        monkeypatch.setenv("PORT", "10000")
        assert Settings().PORT == 10000

    def test_missing_required_lists_api_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        assert Settings().missing_required() == ["GROQ_API_KEY"]

    def test_nothing_missing_with_api_key(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "key")
        assert Settings().missing_required() == []

    def test_environment_helpers(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "Production")

        settings = Settings()

        assert settings.is_production()
        assert not settings.is_development()


class TestCreateApp:
    """Tests for create_app."""

    def test_app_starts_without_api_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)

        app = create_app(Settings())

        assert isinstance(app.state.completion_provider, GroqCompletionClient)
        assert TestClient(app).get("/api/health").status_code == 200

    def test_injected_provider_is_used(self, stub_provider):
        provider = stub_provider("not json")
        app = create_app(Settings(), completion_provider=provider)

        response = TestClient(app).post("/api/recommend", json={"answers": []})

        assert response.status_code == 500
        assert len(provider.prompts) == 1

    def test_configured_cors_origin(self, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGIN", "https://travel.example.com")

        app = create_app(Settings())
        response = TestClient(app).get("/api/health")

        assert response.headers["Access-Control-Allow-Origin"] == "https://travel.example.com"

    def test_unhandled_error_returns_500_with_cors(self, stub_provider):
        provider = stub_provider(error=RuntimeError("provider bug"))
        app = create_app(Settings(), completion_provider=provider)

        response = TestClient(app, raise_server_exceptions=False).post(
            "/api/recommend", json={"answers": []}
        )

        assert response.status_code == 500
        assert response.json() == {"detail": "Internal Server Error"}
        assert "provider bug" not in response.text
        assert response.headers["Access-Control-Allow-Origin"] == "*"
        assert response.headers["Access-Control-Allow-Methods"] == "GET, POST, OPTIONS"
