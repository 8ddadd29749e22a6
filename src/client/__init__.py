"""Analytics API client.

Sends natural-language questions to the remote analytics backend.

Responsibilities:
    - Request serialization with conversation history
    - Response validation into typed models
    - Translation of transport and HTTP failures into AnalyticsAPIError

Holds no conversation state; the transcript lives in the controller.
"""

from src.client.analytics_client import AnalyticsClient
from src.client.config import ClientConfig, get_client_config
from src.client.exceptions import (
    AnalyticsAPIError,
    APIConnectionError,
    APIStatusError,
    InvalidResponseError,
)

__all__ = [
    "AnalyticsAPIError",
    "AnalyticsClient",
    "APIConnectionError",
    "APIStatusError",
    "ClientConfig",
    "InvalidResponseError",
    "get_client_config",
]
