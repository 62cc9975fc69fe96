"""Client-wide defaults and the overlay applied to outgoing requests.

Precedence for every overlay-eligible parameter:

1. the value passed explicitly at the call site,
2. else the value configured on the client's :class:`ClientDefaults`,
3. else ``None``, which leaves the field off the wire so the Bot API
   applies its own default.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class ParseMode(str, Enum):
    """Formatting modes understood by the Bot API."""

    MARKDOWN = "Markdown"
    MARKDOWN_V2 = "MarkdownV2"
    HTML = "HTML"


class ClientDefaults(BaseModel):
    """Defaults used wherever a bound action leaves a parameter unspecified.

    Set once when the client is constructed and read-only afterwards.
    """

    parse_mode: Optional[ParseMode] = None
    disable_web_page_preview: Optional[bool] = None
    disable_notification: Optional[bool] = None
    protect_content: Optional[bool] = None
    allow_sending_without_reply: Optional[bool] = None

    model_config = ConfigDict(frozen=True)


OVERLAY_FIELDS = tuple(ClientDefaults.model_fields)


def overlay(explicit: Optional[T], fallback: Optional[T]) -> Optional[T]:
    """Return *explicit* unless it is ``None``, else *fallback*."""
    return explicit if explicit is not None else fallback


def apply_defaults(defaults: Optional[ClientDefaults], **params: Any) -> Dict[str, Any]:
    """Overlay *defaults* onto the keyword parameters of one request.

    Only eligible keys that the caller passed are overlaid, so a request
    without, say, ``disable_web_page_preview`` never gains that field.
    Other keys are copied through unchanged.  A new dict is returned.
    """
    merged = dict(params)
    if defaults is None:
        return merged
    for name in OVERLAY_FIELDS:
        if name in merged:
            merged[name] = overlay(merged[name], getattr(defaults, name))
    return merged
