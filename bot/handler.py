"""Update handling contract consumed by :func:`bot.dispatcher.run_polling`.

A host hands every received :class:`~tgbound.models.Update` to
:meth:`UpdateHandler.handle_update`.  Whatever that raises goes to
:meth:`UpdateHandler.handle_error` and polling continues; whatever
``handle_error`` raises stops the host.
"""

from abc import ABC, abstractmethod
from typing import Awaitable, Callable, Optional

from core.logger import TgboundLogger
from tgbound.client import BotClient
from tgbound.models import Update

logger = TgboundLogger.get_logger()

UpdateCallback = Callable[[BotClient, Update], Awaitable[None]]
ErrorCallback = Callable[[BotClient, Exception], Awaitable[None]]


class UpdateHandler(ABC):
    """Receiver of updates and of the failures raised while handling them."""

    @abstractmethod
    async def handle_update(self, client: BotClient, update: Update) -> None:
        """Process one update.  *update* is already bound to *client*."""

    @abstractmethod
    async def handle_error(self, client: BotClient, exc: Exception) -> None:
        """React to a failure raised by :meth:`handle_update` or by polling."""


class DefaultUpdateHandler(UpdateHandler):
    """:class:`UpdateHandler` assembled from two coroutine functions.

    Usage::

        async def on_update(client, update):
            ...

        handler = DefaultUpdateHandler(on_update)

    Without *error_handler*, failures are logged and otherwise ignored.
    """

    def __init__(self, update_handler: UpdateCallback, error_handler: Optional[ErrorCallback] = None) -> None:
        if update_handler is None:
            raise TypeError("update_handler must be a coroutine function, not None")
        self._update_handler = update_handler
        self._error_handler = error_handler

    async def handle_update(self, client: BotClient, update: Update) -> None:
        await self._update_handler(client, update)

    async def handle_error(self, client: BotClient, exc: Exception) -> None:
        if self._error_handler is not None:
            await self._error_handler(client, exc)
            return
        logger.error(
            "Unhandled error while processing updates",
            exc_info=exc,
            extra={"error_type": type(exc).__name__},
        )
