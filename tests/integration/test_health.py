"""Integration tests for the FastAPI host."""

from httpx import AsyncClient

from src import __version__


class TestHealthEndpoint:
    """Tests for GET /health."""

    async def test_health_returns_status(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "service": "ai-data-agent"}

    async def test_wrong_http_method_returns_405(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/health")

        assert response.status_code == 405

    async def test_cors_headers_present(self, async_client: AsyncClient) -> None:
        response = await async_client.get(
            "/health", headers={"Origin": "http://localhost:3000"}
        )

        assert "access-control-allow-origin" in response.headers

    async def test_openapi_reports_version(self, async_client: AsyncClient) -> None:
        response = await async_client.get("/openapi.json")

        assert response.json()["info"]["version"] == __version__
