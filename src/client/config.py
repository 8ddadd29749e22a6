"""Analytics API client configuration with environment variable loading.

Pydantic-based configuration for the HTTP client that talks to the
analytics backend.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_URL = "https://intern-assignment-backend-iota.vercel.app/api/query"


class ClientConfig(BaseModel):
    """Configuration for the analytics API client.

    Attributes:
        api_url: Full URL of the query endpoint.
        timeout_seconds: Request timeout for a single query.
    """

    api_url: str = Field(
        default_factory=lambda: os.getenv("ANALYTICS_API_URL", DEFAULT_API_URL),
        description="Query endpoint of the analytics API",
    )
    timeout_seconds: float = Field(
        default_factory=lambda: float(os.getenv("ANALYTICS_API_TIMEOUT", "120")),
        gt=0.0,
        description="Request timeout in seconds",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Validate that the endpoint is an http(s) URL."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "ANALYTICS_API_URL must start with http:// or https://"
            )
        return v


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If the configured URL or timeout is invalid.
    """
    return ClientConfig()
