"""Health endpoint smoke test."""

import pytest

pytestmark = pytest.mark.asyncio


async def test_healthcheck_returns_ok(app_context) -> None:
    response = await app_context["client"].get("/api/v1/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "ok"
    assert payload["service"] == "Slotboard Availability API"
    assert payload["timezone"] == "UTC"
    assert payload["database"] == "ok"
    assert "x-request-id" in response.headers
