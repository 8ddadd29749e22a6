"""FastAPI host for the chat UI.

Serves the NiceGUI page alongside a health endpoint.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI in src.main)
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
