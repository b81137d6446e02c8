"""Tests for health check endpoints."""

import pytest
from httpx import AsyncClient


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_returns_200(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.status_code == 200

    @pytest.mark.asyncio
    async def test_health_returns_correct_structure(self, client: AsyncClient) -> None:
        data = (await client.get("/health")).json()

        assert data["status"] == "healthy"
        assert data["version"] == "1.0.0"
        assert "timestamp" in data
        assert "environment" in data

    @pytest.mark.asyncio
    async def test_detailed_health_checks_document_store(self, app_client: AsyncClient) -> None:
        response = await app_client.get("/health/detailed")
        data = response.json()

        assert response.status_code == 200
        assert data["status"] == "healthy"
        assert data["document_store"] == "healthy"
        assert data["splash_done"] is True

    @pytest.mark.asyncio
    async def test_request_id_header_is_set(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "health-1"})

        assert response.headers["x-request-id"] == "health-1"
