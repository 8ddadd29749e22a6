"""Test package for AI Data Agent.

Provides test coverage for all components with unit tests for isolated
logic and integration tests for workflows.

Structure:
    - unit/: Individual function and class tests
    - integration/: Client, transcript and host working together

Leverages pytest with pytest-check for soft assertions.
"""
