"""Inline mentions of users who may have no public username."""

from __future__ import annotations

import html
import re
from typing import Optional

from tgbound.defaults import ParseMode
from tgbound.models import User

_MARKDOWN_SPECIAL = re.compile(r"([_*`\[])")
_MARKDOWN_V2_SPECIAL = re.compile(r"([_*\[\]()~`>#+\-=|{}.!\\])")


def escape_markup(text: str, parse_mode: ParseMode) -> str:
    """Escape *text* so it renders literally under *parse_mode*.

    Raises:
        ValueError: If *parse_mode* is not a known markup.
    """
    if parse_mode == ParseMode.HTML:
        return html.escape(text)
    if parse_mode == ParseMode.MARKDOWN:
        return _MARKDOWN_SPECIAL.sub(r"\\\1", text)
    if parse_mode == ParseMode.MARKDOWN_V2:
        return _MARKDOWN_V2_SPECIAL.sub(r"\\\1", text)
    raise ValueError(f"Unsupported parse mode: {parse_mode!r}")


def text_mention(
    user: User,
    parse_mode: ParseMode = ParseMode.HTML,
    display_name: Optional[str] = None,
) -> str:
    """Build a link to *user* for a message sent with *parse_mode*.

    The link text is plain text and is escaped for *parse_mode*, so names
    such as ``<Bob>`` or ``A_B`` cannot break the surrounding markup.

    Args:
        user: The user to mention.
        parse_mode: Markup the surrounding text is written in.
        display_name: Link text; defaults to :attr:`User.full_name`.

    Raises:
        ValueError: If *parse_mode* is not a known markup.
    """
    name = escape_markup(display_name if display_name is not None else user.full_name, parse_mode)
    link = f"tg://user?id={user.id}"
    if parse_mode == ParseMode.HTML:
        return f"<a href='{link}'>{name}</a>"
    return f"[{name}]({link})"
