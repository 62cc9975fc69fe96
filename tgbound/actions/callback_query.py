"""Actions bound to a received :class:`~tgbound.models.CallbackQuery`.

The ``edit_*`` actions address whatever message the pressed button lives
on.  For a message in a chat they return the edited
:class:`~tgbound.models.Message`; for an inline message the Bot API only
acknowledges the edit, so they return ``None``.
"""

from __future__ import annotations

from typing import List, Optional

from tgbound.carrier import resolve
from tgbound.defaults import ParseMode, apply_defaults
from tgbound.methods import (
    AnswerCallbackQuery,
    EditInlineMessageCaption,
    EditInlineMessageLiveLocation,
    EditInlineMessageMedia,
    EditInlineMessageReplyMarkup,
    EditInlineMessageText,
    EditMessageCaption,
    EditMessageLiveLocation,
    EditMessageMedia,
    EditMessageReplyMarkup,
    EditMessageText,
    StopInlineMessageLiveLocation,
    StopMessageLiveLocation,
)
from tgbound.models import CallbackQuery, InlineKeyboardMarkup, InputMedia, Message, MessageEntity
from tgbound.targets import resolve_target, submit_to_target


async def answer(
    query: CallbackQuery,
    text: Optional[str] = None,
    *,
    show_alert: Optional[bool] = None,
    url: Optional[str] = None,
    cache_time: Optional[int] = None,
) -> bool:
    """Acknowledge *query*, optionally showing a notification or an alert."""
    return await resolve(query).submit(
        AnswerCallbackQuery(
            callback_query_id=query.id, text=text, show_alert=show_alert, url=url, cache_time=cache_time
        )
    )


# ── Updating the originating message ─────────────────────────────────────────


async def edit_text(
    query: CallbackQuery,
    text: str,
    *,
    parse_mode: Optional[ParseMode] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Optional[Message]:
    client = resolve(query)
    target = resolve_target(query)
    fields = dict(
        text=text,
        entities=entities,
        reply_markup=reply_markup,
        **apply_defaults(client.defaults, parse_mode=parse_mode, disable_web_page_preview=disable_web_page_preview),
    )
    return await submit_to_target(
        client,
        target,
        lambda chat_id, message_id: EditMessageText(chat_id=chat_id, message_id=message_id, **fields),
        lambda inline_message_id: EditInlineMessageText(inline_message_id=inline_message_id, **fields),
    )


async def edit_caption(
    query: CallbackQuery,
    caption: Optional[str],
    *,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Optional[Message]:
    client = resolve(query)
    target = resolve_target(query)
    fields = dict(
        caption=caption,
        caption_entities=caption_entities,
        reply_markup=reply_markup,
        **apply_defaults(client.defaults, parse_mode=parse_mode),
    )
    return await submit_to_target(
        client,
        target,
        lambda chat_id, message_id: EditMessageCaption(chat_id=chat_id, message_id=message_id, **fields),
        lambda inline_message_id: EditInlineMessageCaption(inline_message_id=inline_message_id, **fields),
    )


async def edit_media(
    query: CallbackQuery,
    media: InputMedia,
    *,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Optional[Message]:
    client = resolve(query)
    target = resolve_target(query)
    return await submit_to_target(
        client,
        target,
        lambda chat_id, message_id: EditMessageMedia(
            chat_id=chat_id, message_id=message_id, media=media, reply_markup=reply_markup
        ),
        lambda inline_message_id: EditInlineMessageMedia(
            inline_message_id=inline_message_id, media=media, reply_markup=reply_markup
        ),
    )


async def edit_reply_markup(
    query: CallbackQuery,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Optional[Message]:
    """Replace the inline keyboard; ``None`` removes it."""
    client = resolve(query)
    target = resolve_target(query)
    return await submit_to_target(
        client,
        target,
        lambda chat_id, message_id: EditMessageReplyMarkup(
            chat_id=chat_id, message_id=message_id, reply_markup=reply_markup
        ),
        lambda inline_message_id: EditInlineMessageReplyMarkup(
            inline_message_id=inline_message_id, reply_markup=reply_markup
        ),
    )


async def edit_live_location(
    query: CallbackQuery,
    latitude: float,
    longitude: float,
    *,
    horizontal_accuracy: Optional[float] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Optional[Message]:
    client = resolve(query)
    target = resolve_target(query)
    fields = dict(
        latitude=latitude,
        longitude=longitude,
        horizontal_accuracy=horizontal_accuracy,
        heading=heading,
        proximity_alert_radius=proximity_alert_radius,
        reply_markup=reply_markup,
    )
    return await submit_to_target(
        client,
        target,
        lambda chat_id, message_id: EditMessageLiveLocation(chat_id=chat_id, message_id=message_id, **fields),
        lambda inline_message_id: EditInlineMessageLiveLocation(inline_message_id=inline_message_id, **fields),
    )


async def stop_live_location(
    query: CallbackQuery,
    *,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Optional[Message]:
    client = resolve(query)
    target = resolve_target(query)
    return await submit_to_target(
        client,
        target,
        lambda chat_id, message_id: StopMessageLiveLocation(
            chat_id=chat_id, message_id=message_id, reply_markup=reply_markup
        ),
        lambda inline_message_id: StopInlineMessageLiveLocation(
            inline_message_id=inline_message_id, reply_markup=reply_markup
        ),
    )
