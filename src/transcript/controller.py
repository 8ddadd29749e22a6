"""Transcript state for one chat page.

Holds the append-only message list together with the loading, error and
connection flags the page binds to.
"""

import logging
from collections.abc import Callable

from src.client.analytics_client import AnalyticsClient
from src.client.exceptions import AnalyticsAPIError, APIConnectionError
from src.models.schemas import Message

logger = logging.getLogger(__name__)

EXAMPLE_QUESTIONS = [
    "What were our top-performing products last quarter by revenue?",
    "Show me the trend of customer acquisition costs by channel over the past year",
    "Which sales regions had the highest growth rate compared to the same period last year?",
    "Analyze customer churn rates by demographic segment",
    "What's the correlation between marketing spend and revenue across different product categories?",
]

MessageListener = Callable[[Message], None]


class TranscriptController:
    """Manages the conversation transcript for a user session.

    Attributes:
        draft: Current text of the input field.
        is_loading: True while a query is in flight.
        error: Text of the last failure, shown as a banner.
        connected: Whether the last request reached the API.
    """

    def __init__(self, client: AnalyticsClient) -> None:
        self._client = client
        self._messages: list[Message] = []
        self._listeners: list[MessageListener] = []
        self.draft: str = ""
        self.is_loading: bool = False
        self.error: str | None = None
        self.connected: bool = True

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def subscribe(self, listener: MessageListener) -> None:
        """Call ``listener`` with every message appended from now on."""
        self._listeners.append(listener)

    def use_example(self, question: str) -> None:
        self.draft = question

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        for listener in self._listeners:
            listener(message)

    async def submit(self, text: str | None = None) -> Message | None:
        """Send a question and record the exchange.

        Appends the user message, then exactly one assistant or error
        message. Empty input, or input submitted while a previous query is
        still in flight, is ignored.

        Args:
            text: Question to send. Defaults to the current draft.

        Returns:
            The appended assistant or error message, or None when ignored.
        """
        query = self.draft if text is None else text
        if not query or not query.strip():
            return None
        if self.is_loading:
            logger.info("Ignoring submit while a query is in flight")
            return None

        history = list(self._messages)
        self._append(Message.user(query))
        self.is_loading = True
        self.error = None

        try:
            response = await self._client.query(query, history)
        except AnalyticsAPIError as e:
            logger.error(f"Query failed: {e}")
            self.error = str(e)
            self.connected = not isinstance(e, APIConnectionError)
            reply = Message.error(f"Failed to get a response. {e}")
        else:
            self.connected = True
            reply = Message.from_response(response)
        finally:
            self.is_loading = False
            self.draft = ""

        self._append(reply)
        return reply
