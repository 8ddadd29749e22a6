"""Unit tests for TranscriptController."""

import asyncio

import httpx
import pytest_check as check

from src.models.schemas import Message, MessageType
from src.transcript.controller import EXAMPLE_QUESTIONS, TranscriptController


def _ok(body: dict):
    return lambda request: httpx.Response(200, json=body)


class TestSubmit:
    """Tests for the submission flow."""

    async def test_appends_user_then_assistant(self, mock_api, sample_response) -> None:
        client, _ = mock_api(_ok(sample_response))
        controller = TranscriptController(client)

        reply = await controller.submit("Top products?")

        messages = controller.messages
        check.equal(len(messages), 2)
        check.equal(messages[0], Message.user("Top products?"))
        check.equal(messages[1].type, MessageType.ASSISTANT)
        check.equal(messages[1].sql_query, sample_response["sqlQuery"])
        check.is_(reply, messages[1])
        check.is_false(controller.is_loading)
        check.is_none(controller.error)
        check.is_true(controller.connected)

    async def test_submits_draft_and_resets_it(self, mock_api) -> None:
        client, sent = mock_api(_ok({"text": "ok"}))
        controller = TranscriptController(client)
        controller.use_example(EXAMPLE_QUESTIONS[0])

        await controller.submit()

        check.equal(sent[0]["query"], EXAMPLE_QUESTIONS[0])
        check.equal(controller.draft, "")

    async def test_history_excludes_current_question(self, mock_api) -> None:
        client, sent = mock_api(_ok({"text": "ok"}))
        controller = TranscriptController(client)

        await controller.submit("first")
        await controller.submit("second")

        check.equal(sent[0]["history"], [])
        check.equal([h["content"] for h in sent[1]["history"]], ["first", "ok"])
        check.equal(sent[1]["query"], "second")

    async def test_empty_and_whitespace_input_is_noop(self, mock_api) -> None:
        client, sent = mock_api(_ok({"text": "ok"}))
        controller = TranscriptController(client)

        for text in ("", "   ", "\n\t"):
            check.is_none(await controller.submit(text))

        check.equal(controller.messages, ())
        check.equal(sent, [])

    async def test_listeners_see_each_append_in_order(self, mock_api) -> None:
        client, _ = mock_api(_ok({"text": "answer"}))
        controller = TranscriptController(client)
        seen: list[Message] = []
        controller.subscribe(seen.append)

        await controller.submit("question")

        check.equal([m.type for m in seen], [MessageType.USER, MessageType.ASSISTANT])
        check.equal(tuple(seen), controller.messages)

    async def test_loading_flag_set_while_in_flight(self, mock_api) -> None:
        controller: TranscriptController

        def handler(request: httpx.Request) -> httpx.Response:
            check.is_true(controller.is_loading)
            check.equal(len(controller.messages), 1)
            return httpx.Response(200, json={"text": "ok"})

        client, _ = mock_api(handler)
        controller = TranscriptController(client)

        await controller.submit("q")

        assert controller.is_loading is False

    async def test_submit_while_loading_is_ignored(self, mock_api) -> None:
        client, sent = mock_api(_ok({"text": "ok"}))
        controller = TranscriptController(client)
        controller.is_loading = True

        assert await controller.submit("q") is None
        assert sent == []


class TestSubmitFailure:
    """Tests for failed requests."""

    async def test_http_error_appends_error_entry(self, mock_api) -> None:
        client, _ = mock_api(_ok({"text": "first answer"}))
        controller = TranscriptController(client)
        await controller.submit("first")
        before = controller.messages

        controller._client, _ = mock_api(lambda request: httpx.Response(500))
        reply = await controller.submit("second")

        messages = controller.messages
        check.equal(messages[:2], before)
        check.equal(len(messages), 4)
        check.equal(reply.type, MessageType.ERROR)
        check.equal(reply.content, "Failed to get a response. Error: 500")
        check.equal(controller.error, "Error: 500")
        check.is_true(controller.connected)
        check.is_false(controller.is_loading)
        check.equal(controller.draft, "")

    async def test_connection_error_marks_disconnected(self, mock_api) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectTimeout("timed out", request=request)

        client, _ = mock_api(handler)
        controller = TranscriptController(client)

        reply = await controller.submit("q")

        check.is_in("Connection failed: timed out", reply.content)
        check.is_false(controller.connected)

    async def test_error_cleared_on_next_submit(self, mock_api) -> None:
        responses = iter([httpx.Response(502), httpx.Response(200, json={"text": "ok"})])
        client, _ = mock_api(lambda request: next(responses))
        controller = TranscriptController(client)

        await controller.submit("a")
        check.equal(controller.error, "Error: 502")
        await controller.submit("b")

        check.is_none(controller.error)
        check.equal(controller.messages[-1].type, MessageType.ASSISTANT)


async def test_concurrent_submits_record_one_exchange(mock_api) -> None:
    """A second submit issued while the first is pending is dropped."""
    async def slow_handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(0.01)
        return httpx.Response(200, json={"text": "ok"})

    client, sent = mock_api(slow_handler)
    controller = TranscriptController(client)

    results = await asyncio.gather(controller.submit("one"), controller.submit("two"))

    check.equal(sum(r is not None for r in results), 1)
    check.equal(len(sent), 1)
    check.equal(len(controller.messages), 2)


class TestNullFieldAnswers:
    """Answers carrying explicit nulls still become assistant entries."""

    async def test_each_null_case_appends_assistant_entry(self, mock_api) -> None:
        bodies = [
            {"text": "a", "visualizations": None},
            {"text": "b", "tableData": {"columns": ["x"], "rows": None}},
            {"text": "c", "tableData": {"columns": None, "rows": [{"x": 1}]}},
            {"text": "d", "visualizations": [{"type": "table", "title": None, "data": None}]},
            {"text": None, "sqlQuery": None, "tableData": None},
        ]
        responses = iter(bodies)
        client, _ = mock_api(lambda request: httpx.Response(200, json=next(responses)))
        controller = TranscriptController(client)

        for i in range(len(bodies)):
            reply = await controller.submit(f"question {i}")
            check.equal(reply.type, MessageType.ASSISTANT)

        check.is_none(controller.error)
        check.equal(len(controller.messages), 2 * len(bodies))
