"""Health endpoint and HTTP middleware tests."""

from unittest.mock import MagicMock

import pytest
from falcon.asgi import App
from falcon.testing import TestClient
from psycopg import OperationalError

from bintrack.interfaces.api.resources.health import HealthResource


@pytest.fixture
def client() -> TestClient:
    """Create test client with health endpoints."""
    app = App()
    health = HealthResource()
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    return TestClient(app)


def test_health_liveness(client: TestClient) -> None:
    """GET /v1/health returns 200."""
    result = client.simulate_get("/v1/health")
    assert result.status_code == 200
    assert result.json["status"] == "ok"


def test_health_ready(client: TestClient) -> None:
    """GET /v1/health/ready returns 200."""
    result = client.simulate_get("/v1/health/ready")
    assert result.status_code == 200
    assert result.json["status"] == "ready"


def test_health_ready_database_down() -> None:
    """GET /v1/health/ready returns 503 when the pool cannot connect."""
    pool = MagicMock()
    pool.connection.side_effect = OperationalError("connection refused")
    app = App()
    health = HealthResource(pool=pool)
    app.add_route("/v1/health/ready", health, suffix="ready")

    result = TestClient(app).simulate_get("/v1/health/ready")
    assert result.status_code == 503
    assert result.json["status"] == "unavailable"


def test_cors_preflight_for_allowed_origin() -> None:
    """OPTIONS from an allowed origin is answered by the middleware."""
    from bintrack.interfaces.api.middleware.cors import CORSMiddleware

    app = App(middleware=[CORSMiddleware(["http://localhost:3000"])])
    app.add_route("/v1/health", HealthResource())
    client = TestClient(app)

    result = client.simulate_options(
        "/v1/health", headers={"Origin": "http://localhost:3000"}
    )
    assert result.status_code == 204
    assert result.headers["access-control-allow-origin"] == "http://localhost:3000"

    result = client.simulate_get("/v1/health", headers={"Origin": "http://evil.example"})
    assert "access-control-allow-origin" not in result.headers
