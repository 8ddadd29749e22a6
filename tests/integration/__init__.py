"""Integration tests for components working together as a system.

Coverage:
    - FastAPI host endpoints with real HTTP requests
    - Client and transcript against an in-process analytics backend

Backends run in-process through httpx.ASGITransport.
"""
