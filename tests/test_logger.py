"""Tests for the shared JSON logger."""

import json
import logging
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import bot.dispatcher
import bot.handler
import tgbound.client
from core.logger import TgboundLogger, _JsonFormatter


# ── Logger wiring ────────────────────────────────────────────────────────────


class TestLoggerWiring:
    """The host shares one logger; the client logs through its child."""

    def test_singleton(self) -> None:
        assert TgboundLogger.get_logger() is TgboundLogger.get_logger()
        assert TgboundLogger.get_logger().name == "tgbound"

    def test_host_modules_use_shared_logger(self) -> None:
        shared = TgboundLogger.get_logger()
        assert bot.dispatcher.logger is shared
        assert bot.handler.logger is shared

    def test_client_logs_through_child(self) -> None:
        assert tgbound.client._logger.name == "tgbound.client"
        assert tgbound.client._logger.parent is TgboundLogger.get_logger()


# ── JSON formatting ──────────────────────────────────────────────────────────


class TestJsonFormatter:
    """Validate the single-line JSON output."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="tgbound", level=logging.INFO, pathname=__file__, lineno=1,
            msg="Update handled", args=(), exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_standard_fields(self) -> None:
        entry = json.loads(_JsonFormatter().format(self._record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "tgbound"
        assert entry["message"] == "Update handled"

    def test_extra_fields_merged(self) -> None:
        entry = json.loads(_JsonFormatter().format(self._record(update_id=7, update_type="message")))
        assert entry["update_id"] == 7
        assert entry["update_type"] == "message"
