"""Bot host layer — update handling contract and the long-polling loop.

This package may import from ``core/``, ``tgbound/`` and ``config`` only.
"""

from bot.dispatcher import process_update, run_polling
from bot.handler import DefaultUpdateHandler, UpdateHandler

__all__ = [
    # Handling contract
    "UpdateHandler",
    "DefaultUpdateHandler",
    # Polling host
    "run_polling",
    "process_update",
]
