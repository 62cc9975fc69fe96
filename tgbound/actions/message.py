"""Actions bound to a received :class:`~tgbound.models.Message`.

``reply_*`` actions send into the message's chat; pass ``as_reply=True``
to make the new message a reply to the receiver.
"""

from __future__ import annotations

from typing import List, Optional, Union

from tgbound.carrier import resolve
from tgbound.defaults import ParseMode, apply_defaults, overlay
from tgbound.methods import (
    CopyMessage,
    DeleteMessage,
    EditMessageCaption,
    EditMessageLiveLocation,
    EditMessageMedia,
    EditMessageReplyMarkup,
    EditMessageText,
    ForwardMessage,
    PinChatMessage,
    SendAnimation,
    SendAudio,
    SendContact,
    SendDice,
    SendDocument,
    SendGame,
    SendInvoice,
    SendLocation,
    SendMediaGroup,
    SendMessage,
    SendPhoto,
    SendPoll,
    SendSticker,
    SendVenue,
    SendVideo,
    SendVideoNote,
    SendVoice,
    StopMessageLiveLocation,
    StopPoll,
    UnpinChatMessage,
)
from tgbound.models import (
    InlineKeyboardMarkup,
    InputMedia,
    LabeledPrice,
    Message,
    MessageEntity,
    MessageId,
    Poll,
    ReplyMarkup,
)

ChatId = Union[int, str]


def _reply_to(message: Message, as_reply: bool, reply_to_message_id: Optional[int]) -> Optional[int]:
    return message.message_id if as_reply else reply_to_message_id


# ── Replying ─────────────────────────────────────────────────────────────────


async def reply_text(
    message: Message,
    text: str,
    *,
    as_reply: bool = False,
    parse_mode: Optional[ParseMode] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send a text message to the chat *message* belongs to."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_web_page_preview=disable_web_page_preview,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendMessage(
            chat_id=message.chat.id,
            text=text,
            entities=entities,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_photo(
    message: Message,
    photo: str,
    *,
    as_reply: bool = False,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send a photo by ``file_id`` or HTTP URL."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendPhoto(
            chat_id=message.chat.id,
            photo=photo,
            caption=caption,
            caption_entities=caption_entities,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_document(
    message: Message,
    document: str,
    *,
    as_reply: bool = False,
    thumb: Optional[str] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_content_type_detection: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendDocument(
            chat_id=message.chat.id,
            document=document,
            thumb=thumb,
            caption=caption,
            caption_entities=caption_entities,
            disable_content_type_detection=disable_content_type_detection,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_audio(
    message: Message,
    audio: str,
    *,
    as_reply: bool = False,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    duration: Optional[int] = None,
    performer: Optional[str] = None,
    title: Optional[str] = None,
    thumb: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send an audio file to be shown in the music player."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendAudio(
            chat_id=message.chat.id,
            audio=audio,
            caption=caption,
            caption_entities=caption_entities,
            duration=duration,
            performer=performer,
            title=title,
            thumb=thumb,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_video(
    message: Message,
    video: str,
    *,
    as_reply: bool = False,
    duration: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    thumb: Optional[str] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    supports_streaming: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendVideo(
            chat_id=message.chat.id,
            video=video,
            duration=duration,
            width=width,
            height=height,
            thumb=thumb,
            caption=caption,
            caption_entities=caption_entities,
            supports_streaming=supports_streaming,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_animation(
    message: Message,
    animation: str,
    *,
    as_reply: bool = False,
    duration: Optional[int] = None,
    width: Optional[int] = None,
    height: Optional[int] = None,
    thumb: Optional[str] = None,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send a GIF or a silent H.264 video."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendAnimation(
            chat_id=message.chat.id,
            animation=animation,
            duration=duration,
            width=width,
            height=height,
            thumb=thumb,
            caption=caption,
            caption_entities=caption_entities,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_voice(
    message: Message,
    voice: str,
    *,
    as_reply: bool = False,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    duration: Optional[int] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendVoice(
            chat_id=message.chat.id,
            voice=voice,
            caption=caption,
            caption_entities=caption_entities,
            duration=duration,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_video_note(
    message: Message,
    video_note: str,
    *,
    as_reply: bool = False,
    duration: Optional[int] = None,
    length: Optional[int] = None,
    thumb: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send a rounded square video message by ``file_id``."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendVideoNote(
            chat_id=message.chat.id,
            video_note=video_note,
            duration=duration,
            length=length,
            thumb=thumb,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_media_group(
    message: Message,
    media: List[InputMedia],
    *,
    as_reply: bool = False,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
) -> List[Message]:
    """Send 2-10 items as an album; returns one message per item."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendMediaGroup(
            chat_id=message.chat.id,
            media=media,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            **params,
        )
    )


async def reply_location(
    message: Message,
    latitude: float,
    longitude: float,
    *,
    as_reply: bool = False,
    horizontal_accuracy: Optional[float] = None,
    live_period: Optional[int] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendLocation(
            chat_id=message.chat.id,
            latitude=latitude,
            longitude=longitude,
            horizontal_accuracy=horizontal_accuracy,
            live_period=live_period,
            heading=heading,
            proximity_alert_radius=proximity_alert_radius,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_venue(
    message: Message,
    latitude: float,
    longitude: float,
    title: str,
    address: str,
    *,
    as_reply: bool = False,
    foursquare_id: Optional[str] = None,
    foursquare_type: Optional[str] = None,
    google_place_id: Optional[str] = None,
    google_place_type: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendVenue(
            chat_id=message.chat.id,
            latitude=latitude,
            longitude=longitude,
            title=title,
            address=address,
            foursquare_id=foursquare_id,
            foursquare_type=foursquare_type,
            google_place_id=google_place_id,
            google_place_type=google_place_type,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_contact(
    message: Message,
    phone_number: str,
    first_name: str,
    *,
    as_reply: bool = False,
    last_name: Optional[str] = None,
    vcard: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendContact(
            chat_id=message.chat.id,
            phone_number=phone_number,
            first_name=first_name,
            last_name=last_name,
            vcard=vcard,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_poll(
    message: Message,
    question: str,
    options: List[str],
    *,
    as_reply: bool = False,
    is_anonymous: Optional[bool] = None,
    type: Optional[str] = None,
    allows_multiple_answers: Optional[bool] = None,
    correct_option_id: Optional[int] = None,
    explanation: Optional[str] = None,
    explanation_parse_mode: Optional[ParseMode] = None,
    open_period: Optional[int] = None,
    close_date: Optional[int] = None,
    is_closed: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send a native poll.

    ``explanation_parse_mode`` falls back to the client's ``parse_mode``
    default like every other formatting parameter.
    """
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendPoll(
            chat_id=message.chat.id,
            question=question,
            options=options,
            is_anonymous=is_anonymous,
            type=type,
            allows_multiple_answers=allows_multiple_answers,
            correct_option_id=correct_option_id,
            explanation=explanation,
            explanation_parse_mode=overlay(explanation_parse_mode, client.defaults.parse_mode),
            open_period=open_period,
            close_date=close_date,
            is_closed=is_closed,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_dice(
    message: Message,
    *,
    as_reply: bool = False,
    emoji: Optional[str] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendDice(
            chat_id=message.chat.id,
            emoji=emoji,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_sticker(
    message: Message,
    sticker: str,
    *,
    as_reply: bool = False,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendSticker(
            chat_id=message.chat.id,
            sticker=sticker,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_game(
    message: Message,
    game_short_name: str,
    *,
    as_reply: bool = False,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendGame(
            chat_id=message.chat.id,
            game_short_name=game_short_name,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


async def reply_invoice(
    message: Message,
    title: str,
    description: str,
    payload: str,
    provider_token: str,
    currency: str,
    prices: List[LabeledPrice],
    *,
    as_reply: bool = False,
    max_tip_amount: Optional[int] = None,
    suggested_tip_amounts: Optional[List[int]] = None,
    start_parameter: Optional[str] = None,
    provider_data: Optional[str] = None,
    photo_url: Optional[str] = None,
    photo_size: Optional[int] = None,
    photo_width: Optional[int] = None,
    photo_height: Optional[int] = None,
    need_name: Optional[bool] = None,
    need_phone_number: Optional[bool] = None,
    need_email: Optional[bool] = None,
    need_shipping_address: Optional[bool] = None,
    send_phone_number_to_provider: Optional[bool] = None,
    send_email_to_provider: Optional[bool] = None,
    is_flexible: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    """Send an invoice; *prices* are in the smallest units of *currency*."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        SendInvoice(
            chat_id=message.chat.id,
            title=title,
            description=description,
            payload=payload,
            provider_token=provider_token,
            currency=currency,
            prices=prices,
            max_tip_amount=max_tip_amount,
            suggested_tip_amounts=suggested_tip_amounts,
            start_parameter=start_parameter,
            provider_data=provider_data,
            photo_url=photo_url,
            photo_size=photo_size,
            photo_width=photo_width,
            photo_height=photo_height,
            need_name=need_name,
            need_phone_number=need_phone_number,
            need_email=need_email,
            need_shipping_address=need_shipping_address,
            send_phone_number_to_provider=send_phone_number_to_provider,
            send_email_to_provider=send_email_to_provider,
            is_flexible=is_flexible,
            reply_to_message_id=_reply_to(message, as_reply, reply_to_message_id),
            reply_markup=reply_markup,
            **params,
        )
    )


# ── Updating ─────────────────────────────────────────────────────────────────


async def edit_text(
    message: Message,
    text: str,
    *,
    parse_mode: Optional[ParseMode] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    """Replace the text of *message*; returns the edited message."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults, parse_mode=parse_mode, disable_web_page_preview=disable_web_page_preview
    )
    return await client.submit(
        EditMessageText(
            chat_id=message.chat.id,
            message_id=message.message_id,
            text=text,
            entities=entities,
            reply_markup=reply_markup,
            **params,
        )
    )


async def edit_caption(
    message: Message,
    caption: Optional[str],
    *,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    client = resolve(message)
    params = apply_defaults(client.defaults, parse_mode=parse_mode)
    return await client.submit(
        EditMessageCaption(
            chat_id=message.chat.id,
            message_id=message.message_id,
            caption=caption,
            caption_entities=caption_entities,
            reply_markup=reply_markup,
            **params,
        )
    )


async def edit_media(
    message: Message,
    media: InputMedia,
    *,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    client = resolve(message)
    return await client.submit(
        EditMessageMedia(
            chat_id=message.chat.id, message_id=message.message_id, media=media, reply_markup=reply_markup
        )
    )


async def edit_reply_markup(
    message: Message,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    """Replace the inline keyboard of *message*; ``None`` removes it."""
    client = resolve(message)
    return await client.submit(
        EditMessageReplyMarkup(chat_id=message.chat.id, message_id=message.message_id, reply_markup=reply_markup)
    )


async def edit_live_location(
    message: Message,
    latitude: float,
    longitude: float,
    *,
    horizontal_accuracy: Optional[float] = None,
    heading: Optional[int] = None,
    proximity_alert_radius: Optional[int] = None,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    client = resolve(message)
    return await client.submit(
        EditMessageLiveLocation(
            chat_id=message.chat.id,
            message_id=message.message_id,
            latitude=latitude,
            longitude=longitude,
            horizontal_accuracy=horizontal_accuracy,
            heading=heading,
            proximity_alert_radius=proximity_alert_radius,
            reply_markup=reply_markup,
        )
    )


async def stop_live_location(
    message: Message,
    *,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Message:
    client = resolve(message)
    return await client.submit(
        StopMessageLiveLocation(chat_id=message.chat.id, message_id=message.message_id, reply_markup=reply_markup)
    )


async def stop_poll(
    message: Message,
    *,
    reply_markup: Optional[InlineKeyboardMarkup] = None,
) -> Poll:
    """Stop the poll sent in *message*; returns the final poll state."""
    client = resolve(message)
    return await client.submit(
        StopPoll(chat_id=message.chat.id, message_id=message.message_id, reply_markup=reply_markup)
    )


async def delete(message: Message) -> bool:
    client = resolve(message)
    return await client.submit(DeleteMessage(chat_id=message.chat.id, message_id=message.message_id))


# ── Others ───────────────────────────────────────────────────────────────────


async def forward(
    message: Message,
    chat_id: ChatId,
    *,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
) -> Message:
    """Forward *message* to *chat_id*."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults, disable_notification=disable_notification, protect_content=protect_content
    )
    return await client.submit(
        ForwardMessage(chat_id=chat_id, from_chat_id=message.chat.id, message_id=message.message_id, **params)
    )


async def copy(
    message: Message,
    chat_id: ChatId,
    *,
    caption: Optional[str] = None,
    parse_mode: Optional[ParseMode] = None,
    caption_entities: Optional[List[MessageEntity]] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> MessageId:
    """Copy *message* to *chat_id* without a link to the original."""
    client = resolve(message)
    params = apply_defaults(
        client.defaults,
        parse_mode=parse_mode,
        disable_notification=disable_notification,
        protect_content=protect_content,
        allow_sending_without_reply=allow_sending_without_reply,
    )
    return await client.submit(
        CopyMessage(
            chat_id=chat_id,
            from_chat_id=message.chat.id,
            message_id=message.message_id,
            caption=caption,
            caption_entities=caption_entities,
            reply_to_message_id=reply_to_message_id,
            reply_markup=reply_markup,
            **params,
        )
    )


async def pin(message: Message, *, disable_notification: Optional[bool] = None) -> bool:
    client = resolve(message)
    params = apply_defaults(client.defaults, disable_notification=disable_notification)
    return await client.submit(PinChatMessage(chat_id=message.chat.id, message_id=message.message_id, **params))


async def unpin(message: Message) -> bool:
    client = resolve(message)
    return await client.submit(UnpinChatMessage(chat_id=message.chat.id, message_id=message.message_id))
