"""Pydantic models shared by the client, the transcript and the UI.

Provides type safety and validation for everything exchanged with the
analytics API.

Models:
    - Message: Transcript entry (user, assistant or error)
    - Visualization / Series: Chart descriptions sent by the API
    - TableResult: Raw tabular query result
    - QueryRequest / QueryResponse: API request and response bodies
"""

from src.models.schemas import (
    Message,
    MessageType,
    QueryRequest,
    QueryResponse,
    Series,
    TableResult,
    Visualization,
)

__all__ = [
    "Message",
    "MessageType",
    "QueryRequest",
    "QueryResponse",
    "Series",
    "TableResult",
    "Visualization",
]
