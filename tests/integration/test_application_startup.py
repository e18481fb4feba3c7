"""Application lifecycle, health probes and request middleware."""

import pytest
from fastapi.testclient import TestClient

from src.ichor.api.http import app as application


class TestHealthEndpoints:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_ready_with_database(self, client):
        resp = client.get("/ready")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ready"}

    def test_not_ready_without_dependencies(self):
        application.app.state.app_dependencies = None
        resp = TestClient(application.app).get("/ready")
        assert resp.status_code == 503


class TestRequestMiddleware:
    def test_request_id_echoed(self, client):
        resp = client.get("/health", headers={"X-Request-ID": "req-123"})
        assert resp.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self, client):
        assert client.get("/health").headers["X-Request-ID"]

    def test_security_headers(self, client):
        headers = client.get("/health").headers
        assert headers["X-Content-Type-Options"] == "nosniff"
        assert headers["X-Frame-Options"] == "DENY"


class TestLifespan:
    @pytest.mark.asyncio
    async def test_startup_keeps_installed_dependencies(self, app_dependencies):
        """Startup only builds dependencies when none were installed."""
        application.app.state.app_dependencies = app_dependencies
        try:
            await application.startup()
            assert application.app.state.app_dependencies is app_dependencies
        finally:
            application.app.state.app_dependencies = None

    @pytest.mark.asyncio
    async def test_shutdown_reports_publisher_metrics(self, app_dependencies, log_messages):
        application.app.state.app_dependencies = app_dependencies
        try:
            await application.shutdown()
        finally:
            application.app.state.app_dependencies = None
        assert any("Workflow publisher stopped" in str(m) for m in log_messages)
