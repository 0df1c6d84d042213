"""Tests for the health check endpoint."""

import pytest
from httpx import ASGITransport, AsyncClient

from consult_tracker.application.services import SettingsService
from consult_tracker.domain.entities import ProbeResult, RemoteConfig
from consult_tracker.infrastructure.dependencies import get_settings_service
from consult_tracker.main import app


class StaticConfigRepository:
    def __init__(self, config: RemoteConfig | None):
        self._config = config

    def load(self) -> RemoteConfig | None:
        return self._config

    def save(self, config: RemoteConfig) -> None:
        self._config = config


class UnreachableStore:
    async def probe(self) -> ProbeResult:
        raise AssertionError("health must not touch the remote")


async def _get_health(config: RemoteConfig | None) -> dict:
    app.dependency_overrides[get_settings_service] = lambda: SettingsService(
        StaticConfigRepository(config), UnreachableStore()
    )
    try:
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/v1/health")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    return response.json()


@pytest.mark.asyncio
async def test_health_check_returns_200():
    """Health endpoint should return status, version, and environment."""
    data = await _get_health(None)

    assert data["status"] == "healthy"
    assert "version" in data
    assert "environment" in data
    assert data["remote_configured"] is False


@pytest.mark.asyncio
async def test_health_reports_configured_repository():
    data = await _get_health(RemoteConfig(token="t", owner="o", repo="r"))

    assert data["remote_configured"] is True
