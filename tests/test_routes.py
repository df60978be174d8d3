"""Tests for application-level behavior: health, error rendering, middleware, startup."""

import asyncio
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from portfolio_cms.main import create_app, lifespan


class TestHealthEndpoint:
    def test_health_returns_ok(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["db"] == "ok"
        assert "uptime_seconds" in data


class TestErrorRendering:
    def test_unknown_route_is_json_404(self, client):
        response = client.get("/api/nonexistent")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_malformed_json_is_400(self, client):
        response = client.post(
            "/api/education", content=b"{broken", headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid JSON body"

    def test_datastore_error_is_generic_500(self, client):
        with patch(
            "portfolio_cms.certifications.routes.list_all",
            side_effect=OperationalError("SELECT", {}, Exception("connection lost")),
        ):
            response = client.get("/api/certifications")
        assert response.status_code == 500
        assert response.json() == {"error": "Database error"}

    def test_unexpected_error_is_generic_500(self, client):
        with patch("portfolio_cms.education.routes.list_all", side_effect=RuntimeError("boom")):
            response = client.get("/api/education")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestSecurityHeaders:
    def test_headers_present(self, client):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"


class TestStartup:
    def test_missing_configuration_is_fatal(self):
        app = create_app()

        async def _start():
            async with lifespan(app):
                pass

        with (
            patch("portfolio_cms.main.setup_logging"),
            patch("portfolio_cms.main.settings") as mock_settings,
            patch("portfolio_cms.main._run_migrations") as mock_migrations,
        ):
            mock_settings.missing_required.return_value = ["DATABASE_URL", "CLOUDINARY_API_KEY"]
            with pytest.raises(RuntimeError, match="DATABASE_URL"):
                asyncio.run(_start())
        mock_migrations.assert_not_called()


class TestRateLimit:
    def test_client_key_prefers_forwarded_for(self):
        from starlette.requests import Request

        from portfolio_cms.rate_limit import client_key

        scope = {
            "type": "http",
            "headers": [(b"x-forwarded-for", b"203.0.113.9, 10.0.0.1")],
            "client": ("10.0.0.1", 1234),
        }
        assert client_key(Request(scope)) == "203.0.113.9"

    def test_upload_endpoints_are_limited(self, client):
        statuses = [client.post("/api/technologies", data={}).status_code for _ in range(31)]
        assert statuses[0] == 400
        assert 429 in statuses
