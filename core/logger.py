"""TgboundLogger — Singleton JSON logger with console and rotating file output.

Configures the ``tgbound`` logger once per process.  The bot host
(``config``, ``bot.handler``, ``bot.dispatcher``, ``main``) logs through it
directly.  ``tgbound.client`` logs through the ``tgbound.client`` child and
inherits these handlers, so the library stays silent until an application
asks for the shared logger.
"""

import json
import logging
import os
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from typing import Optional


class _JsonFormatter(logging.Formatter):
    """Render a log record as one line of JSON.

    ``timestamp``, ``level``, ``logger``, ``message``, ``module`` and
    ``func_name`` are always emitted.  Keys supplied through ``extra`` are
    copied in as well, e.g.::

        logger.info("Update handled", extra={"update_id": 7, "update_type": "message"})
    """

    # Attributes every LogRecord has; anything else came in through ``extra``.
    _BUILTIN_ATTRS: frozenset[str] = frozenset(vars(logging.LogRecord(
        name="", level=0, pathname="", lineno=0, msg="", args=(), exc_info=None,
    )))

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "func_name": record.funcName,
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in self._BUILTIN_ATTRS and key not in entry:
                entry[key] = value

        return json.dumps(entry, ensure_ascii=False, default=str)


class TgboundLogger:
    """Process-wide owner of the ``tgbound`` logger.

    Usage::

        from core.logger import TgboundLogger

        logger = TgboundLogger.get_logger()
        logger.info("Polling started")
    """

    _instance: Optional["TgboundLogger"] = None
    _logger: Optional[logging.Logger] = None

    LOGGER_NAME: str = "tgbound"
    _LOG_DIR: str = "logs"
    _LOG_FILE: str = "tgbound.log"
    _MAX_BYTES: int = 5 * 1024 * 1024  # 5 MB
    _BACKUP_COUNT: int = 5

    def __new__(cls, level: int = logging.INFO) -> "TgboundLogger":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._init_logger(level)
        return cls._instance

    def _init_logger(self, level: int) -> None:
        self._logger = logging.getLogger(self.LOGGER_NAME)
        self._logger.setLevel(level)

        # Handlers survive a module reload; don't stack a second set.
        if self._logger.handlers:
            return

        formatter = _JsonFormatter()

        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        self._logger.addHandler(stream_handler)

        os.makedirs(self._LOG_DIR, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(self._LOG_DIR, self._LOG_FILE),
            maxBytes=self._MAX_BYTES,
            backupCount=self._BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self._logger.addHandler(file_handler)

    @staticmethod
    def get_logger(level: int = logging.INFO) -> logging.Logger:
        """Return the shared logger, creating it on first use.

        *level* only takes effect on the first call.
        """
        instance = TgboundLogger(level)
        assert instance._logger is not None
        return instance._logger

    def cleanup(self) -> None:
        """Flush and close all handlers attached to the logger."""
        if self._logger is None:
            return
        for handler in list(self._logger.handlers):
            handler.flush()
            handler.close()
            self._logger.removeHandler(handler)

    def __del__(self) -> None:
        self.cleanup()
