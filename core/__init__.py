"""Process-level infrastructure shared by the SDK and the bot host.

This package must NEVER import from ``bot/`` or ``tgbound/``.
"""

from core.logger import TgboundLogger

__all__ = [
    "TgboundLogger",
]
