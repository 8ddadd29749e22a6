"""AI Data Agent - conversational analytics over a remote query API.

Combines NiceGUI for the chat page, httpx for the API client, Pydantic for
data validation, Plotly for charts and FastAPI for hosting.

Components:
    - client: HTTP client for the analytics query endpoint
    - transcript: Append-only conversation state
    - visualization: Chart figures and CSV export
    - ui: Web interface for chat interactions
    - api: FastAPI host and health endpoint
    - models: Message and API payload schemas
"""

__version__ = "0.1.0"
