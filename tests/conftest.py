"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - async_client: HTTPX client for the FastAPI host
    - client_config: ClientConfig pointing at a test URL
    - sample_response: Realistic analytics API response body
    - mock_api: Builds an AnalyticsClient backed by httpx.MockTransport
"""

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.client.analytics_client import AnalyticsClient
from src.client.config import ClientConfig

TEST_API_URL = "http://analytics.test/api/query"


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_url=TEST_API_URL, timeout_seconds=5.0)


@pytest.fixture
def sample_response() -> dict[str, Any]:
    """Return an API response with SQL, a chart and a result table."""
    return {
        "text": "Widgets led revenue last quarter.",
        "sqlQuery": "SELECT product, SUM(revenue) AS revenue FROM sales GROUP BY product",
        "visualizations": [
            {
                "type": "bar",
                "title": "Revenue by product",
                "data": [
                    {"product": "Widgets", "revenue": 1200},
                    {"product": "Gadgets", "revenue": 800},
                ],
                "xAxis": "product",
                "series": [{"dataKey": "revenue", "color": "#8884d8"}],
            }
        ],
        "tableData": {
            "columns": ["product", "revenue"],
            "rows": [
                {"product": "Widgets", "revenue": 1200},
                {"product": "Gadgets", "revenue": 800},
            ],
        },
    }


@pytest.fixture
def mock_api(
    client_config: ClientConfig,
) -> Callable[..., tuple[AnalyticsClient, list[dict[str, Any]]]]:
    """Build an AnalyticsClient whose requests are answered by ``handler``.

    Returns a factory taking a handler ``(request) -> httpx.Response`` and
    returning the client plus a list collecting every decoded request body.
    """

    def factory(
        handler: Callable[[httpx.Request], httpx.Response],
    ) -> tuple[AnalyticsClient, list[dict[str, Any]]]:
        sent: list[dict[str, Any]] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(json.loads(request.content))
            return handler(request)

        transport = httpx.MockTransport(recording_handler)
        return AnalyticsClient(config=client_config, transport=transport), sent

    return factory
