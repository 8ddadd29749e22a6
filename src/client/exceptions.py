"""Errors raised by the analytics API client."""


class AnalyticsAPIError(Exception):
    """Base class for failures talking to the analytics API."""

    pass


class APIStatusError(AnalyticsAPIError):
    """The API answered with a non-success HTTP status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Error: {status_code}")


class APIConnectionError(AnalyticsAPIError):
    """The API could not be reached."""

    pass


class InvalidResponseError(AnalyticsAPIError):
    """The API answered with a body that is not a valid query response."""

    pass
