"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation and wire serialization
    - client/: Configuration, request building and error translation
    - transcript/: Submission flow and transcript invariants
    - visualization/: Figures, table extraction and CSV export

HTTP is served by httpx.MockTransport; no network access.
"""
