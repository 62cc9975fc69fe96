"""Long-polling host loop.

Fetches batches of updates through :meth:`BotClient.get_updates` and hands
each one to an :class:`~bot.handler.UpdateHandler`.  By default updates
are handled one at a time in ``update_id`` order; ``concurrent=True``
spawns an :func:`asyncio.create_task` per update instead, so a slow
handler never blocks the next poll.
"""

import asyncio
from typing import List, Optional, Set

from bot.handler import UpdateHandler
from core.logger import TgboundLogger
from tgbound.client import BotClient
from tgbound.models import Update

logger = TgboundLogger.get_logger()


async def process_update(client: BotClient, handler: UpdateHandler, update: Update) -> None:
    """Run *handler* on one update, routing its failure to ``handle_error``.

    Cancellation is never routed; a failure inside ``handle_error`` propagates.
    """
    logger.debug("Processing update", extra={"update_id": update.update_id})
    try:
        await handler.handle_update(client, update)
    except asyncio.CancelledError:
        raise
    except Exception as exc:
        logger.debug("Update handler failed", extra={"update_id": update.update_id, "error": str(exc)})
        await handler.handle_error(client, exc)


def _raise_failed(tasks: Set["asyncio.Task[None]"]) -> None:
    """Re-raise the first error-handler failure among finished *tasks*."""
    for task in [t for t in tasks if t.done()]:
        tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            raise task.exception()


async def run_polling(
    client: BotClient,
    handler: UpdateHandler,
    *,
    concurrent: bool = False,
    allowed_updates: Optional[List[str]] = None,
    stop_event: Optional[asyncio.Event] = None,
    poll_timeout: int = 30,
    retry_delay: float = 5,
) -> None:
    """Poll for updates until *stop_event* is set or the task is cancelled.

    Args:
        client: Client used for ``getUpdates``; received updates are bound to it.
        handler: Receiver of updates and failures.
        concurrent: Handle updates in parallel instead of strictly in order.
        allowed_updates: Update kinds to request, e.g. ``["message"]``.
        stop_event: Set it to end the loop after the current batch.
        poll_timeout: Long-poll timeout passed to ``getUpdates``, in seconds.
        retry_delay: Pause after a failed ``getUpdates`` call, in seconds.

    Raises:
        Exception: Whatever ``handler.handle_error`` raises.
    """
    offset: Optional[int] = None
    tasks: Set["asyncio.Task[None]"] = set()

    logger.info("Polling for updates", extra={"concurrent": concurrent, "allowed_updates": allowed_updates})
    try:
        while stop_event is None or not stop_event.is_set():
            _raise_failed(tasks)
            try:
                updates = await client.get_updates(
                    offset=offset, timeout=poll_timeout, allowed_updates=allowed_updates
                )
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.warning(
                    "getUpdates failed, retrying",
                    extra={"api_endpoint": "getUpdates", "retry_delay": retry_delay, "error": str(exc)},
                )
                await handler.handle_error(client, exc)
                await asyncio.sleep(retry_delay)
                continue

            if updates:
                logger.debug("Received updates", extra={"count": len(updates)})
            for update in updates:
                offset = update.update_id + 1
                if concurrent:
                    tasks.add(asyncio.create_task(process_update(client, handler, update)))
                else:
                    await process_update(client, handler, update)

        if tasks:
            await asyncio.gather(*tasks)
    finally:
        for task in tasks:
            task.cancel()
        logger.info("Polling stopped", extra={"offset": offset})
