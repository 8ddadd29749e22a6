"""HTTP client for the analytics query endpoint.

One POST per question: ``{query, history}`` goes out, a QueryResponse comes
back. No retries.
"""

import logging
from collections.abc import Sequence

import httpx
from pydantic import ValidationError

from src.client.config import ClientConfig, get_client_config
from src.client.exceptions import (
    APIConnectionError,
    APIStatusError,
    InvalidResponseError,
)
from src.models.schemas import Message, QueryRequest, QueryResponse

logger = logging.getLogger(__name__)


class AnalyticsClient:
    """Thin async client for the analytics API."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport (used to target in-process apps).
        """
        self._config = config or get_client_config()
        self._transport = transport

    @property
    def api_url(self) -> str:
        return self._config.api_url

    async def query(self, query: str, history: Sequence[Message]) -> QueryResponse:
        """Send a question with its conversation history.

        Args:
            query: The user's question.
            history: Transcript entries that precede the question.

        Returns:
            The parsed API response.

        Raises:
            APIStatusError: Non-2xx response.
            APIConnectionError: Network failure or timeout.
            InvalidResponseError: Body is not a valid query response.
        """
        payload = QueryRequest(query=query, history=list(history)).to_payload()
        logger.info(f"Sending query to {self._config.api_url} ({len(history)} history entries)")

        async with httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self._config.api_url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(f"Analytics API returned HTTP {e.response.status_code}")
                raise APIStatusError(e.response.status_code) from e
            except httpx.RequestError as e:
                logger.warning(f"Analytics API unreachable: {e!r}")
                raise APIConnectionError(f"Connection failed: {e}") from e

        try:
            return QueryResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning(f"Invalid response from analytics API: {e}")
            raise InvalidResponseError(
                f"Invalid response: {e.error_count()} validation error(s)"
            ) from e
