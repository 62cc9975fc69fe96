"""Tests for the update handling contract and the polling loop."""

import asyncio
import sys
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bot.dispatcher import process_update, run_polling
from bot.handler import DefaultUpdateHandler, UpdateHandler
from tgbound.client import BotClient
from tgbound.exceptions import APIException
from tgbound.models import Update


# ── Fixtures ─────────────────────────────────────────────────────────────────


def _polling_client(*batches):
    """Client whose get_updates yields *batches* in turn, then stops the loop.

    A batch that is an exception instance is raised instead of returned.
    """
    client = BotClient("https://api.example.com")
    stop = asyncio.Event()
    pending = list(batches)

    async def get_updates(**kwargs):
        item = pending.pop(0)
        if not pending:
            stop.set()
        if isinstance(item, Exception):
            raise item
        return item

    client.get_updates = AsyncMock(side_effect=get_updates)
    return client, stop


def _updates(*ids):
    return [Update(update_id=i) for i in ids]


class _RecordingHandler(UpdateHandler):
    """Records handled update ids and errors; optionally fails on given ids."""

    def __init__(self, fail_on=(), error_raises=None):
        self.handled = []
        self.errors = []
        self._fail_on = set(fail_on)
        self._error_raises = error_raises

    async def handle_update(self, client, update):
        if update.update_id in self._fail_on:
            raise ValueError(f"boom {update.update_id}")
        self.handled.append(update.update_id)

    async def handle_error(self, client, exc):
        self.errors.append(exc)
        if self._error_raises is not None:
            raise self._error_raises


# ── DefaultUpdateHandler ─────────────────────────────────────────────────────


class TestDefaultUpdateHandler:
    """Validate the callback-based handler."""

    def test_update_handler_required(self) -> None:
        with pytest.raises(TypeError):
            DefaultUpdateHandler(None)

    @pytest.mark.asyncio
    async def test_forwards_updates(self) -> None:
        on_update = AsyncMock()
        handler = DefaultUpdateHandler(on_update)
        client = BotClient("https://api.example.com")
        update = Update(update_id=1)

        await handler.handle_update(client, update)
        on_update.assert_awaited_once_with(client, update)

    @pytest.mark.asyncio
    async def test_custom_error_handler(self) -> None:
        on_error = AsyncMock()
        handler = DefaultUpdateHandler(AsyncMock(), on_error)
        client = BotClient("https://api.example.com")
        exc = RuntimeError("x")

        await handler.handle_error(client, exc)
        on_error.assert_awaited_once_with(client, exc)

    @pytest.mark.asyncio
    @patch("bot.handler.logger")
    async def test_default_error_handler_logs(self, mock_logger: MagicMock) -> None:
        handler = DefaultUpdateHandler(AsyncMock())
        exc = RuntimeError("x")

        await handler.handle_error(BotClient("https://api.example.com"), exc)
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.kwargs["exc_info"] is exc


# ── process_update ───────────────────────────────────────────────────────────


class TestProcessUpdate:
    """Validate error routing for a single update."""

    @pytest.mark.asyncio
    async def test_failure_goes_to_handle_error(self) -> None:
        handler = _RecordingHandler(fail_on={1})
        await process_update(BotClient("https://api.example.com"), handler, Update(update_id=1))
        assert len(handler.errors) == 1
        assert str(handler.errors[0]) == "boom 1"

    @pytest.mark.asyncio
    async def test_error_handler_failure_propagates(self) -> None:
        handler = _RecordingHandler(fail_on={1}, error_raises=KeyError("fatal"))
        with pytest.raises(KeyError):
            await process_update(BotClient("https://api.example.com"), handler, Update(update_id=1))

    @pytest.mark.asyncio
    async def test_cancellation_not_routed(self) -> None:
        handler = MagicMock(spec=UpdateHandler)
        handler.handle_update = AsyncMock(side_effect=asyncio.CancelledError())
        handler.handle_error = AsyncMock()

        with pytest.raises(asyncio.CancelledError):
            await process_update(BotClient("https://api.example.com"), handler, Update(update_id=1))
        handler.handle_error.assert_not_awaited()


# ── run_polling ──────────────────────────────────────────────────────────────


class TestRunPolling:
    """Validate the long-polling loop."""

    @pytest.mark.asyncio
    async def test_handles_updates_in_order_and_advances_offset(self) -> None:
        client, stop = _polling_client(_updates(1, 2), _updates(3))
        handler = _RecordingHandler()

        await run_polling(client, handler, stop_event=stop, poll_timeout=5)

        assert handler.handled == [1, 2, 3]
        offsets = [call.kwargs["offset"] for call in client.get_updates.await_args_list]
        assert offsets == [None, 3]
        assert client.get_updates.await_args.kwargs["timeout"] == 5

    @pytest.mark.asyncio
    async def test_allowed_updates_forwarded(self) -> None:
        client, stop = _polling_client([])
        await run_polling(client, _RecordingHandler(), stop_event=stop, allowed_updates=["message"])
        assert client.get_updates.await_args.kwargs["allowed_updates"] == ["message"]

    @pytest.mark.asyncio
    async def test_handler_failure_does_not_stop_loop(self) -> None:
        client, stop = _polling_client(_updates(1, 2), _updates(3))
        handler = _RecordingHandler(fail_on={2})

        await run_polling(client, handler, stop_event=stop)

        assert handler.handled == [1, 3]
        assert [str(e) for e in handler.errors] == ["boom 2"]
        # The failed update is not fetched again.
        assert client.get_updates.await_args_list[1].kwargs["offset"] == 3

    @pytest.mark.asyncio
    async def test_polling_failure_routed_then_retried(self) -> None:
        failure = APIException(502, {"description": "Bad Gateway"})
        client, stop = _polling_client(failure, _updates(1))
        handler = _RecordingHandler()

        await run_polling(client, handler, stop_event=stop, retry_delay=0)

        assert handler.errors == [failure]
        assert handler.handled == [1]
        assert client.get_updates.await_count == 2

    @pytest.mark.asyncio
    async def test_error_handler_failure_stops_host(self) -> None:
        client, stop = _polling_client(_updates(1, 2), _updates(3))
        handler = _RecordingHandler(fail_on={1}, error_raises=KeyError("fatal"))

        with pytest.raises(KeyError):
            await run_polling(client, handler, stop_event=stop)
        assert handler.handled == []
        assert client.get_updates.await_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_mode_handles_everything(self) -> None:
        client, stop = _polling_client(_updates(1, 2, 3))
        handler = _RecordingHandler()

        await run_polling(client, handler, concurrent=True, stop_event=stop)

        assert sorted(handler.handled) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_concurrent_error_handler_failure_propagates(self) -> None:
        client, stop = _polling_client(_updates(1))
        handler = _RecordingHandler(fail_on={1}, error_raises=KeyError("fatal"))

        with pytest.raises(KeyError):
            await run_polling(client, handler, concurrent=True, stop_event=stop)

    @pytest.mark.asyncio
    async def test_stop_event_already_set(self) -> None:
        client, _ = _polling_client(_updates(1))
        stop = asyncio.Event()
        stop.set()

        await run_polling(client, _RecordingHandler(), stop_event=stop)
        client.get_updates.assert_not_awaited()
