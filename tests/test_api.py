"""Tests for API endpoints."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test basic health check endpoint."""
    response = await client.get("/health/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert data["version"] == "0.1.0"
    assert data["environment"] == "development"


@pytest.mark.asyncio
async def test_liveness(client: AsyncClient) -> None:
    """Test liveness probe endpoint."""
    response = await client.get("/health/live")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "alive"


@pytest.mark.asyncio
async def test_readiness(client: AsyncClient) -> None:
    """Test readiness probe endpoint."""
    response = await client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["api"] == "ok"
    assert data["checks"]["resolver"] == "ok"


@pytest.mark.asyncio
async def test_suggest_through_app(client: AsyncClient) -> None:
    """Suggest endpoint is mounted on the application."""
    response = await client.get(
        "/dates/suggest", params={"q": "tomorrow", "reference": "2024-01-10T09:00:00"}
    )
    assert response.status_code == 200
    data = response.json()
    assert data["results"][0]["label"] == "Tomorrow"
