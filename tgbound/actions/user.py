"""Actions bound to a received :class:`~tgbound.models.User`."""

from __future__ import annotations

from typing import List, Optional, Union

from tgbound.carrier import resolve
from tgbound.defaults import ParseMode, apply_defaults
from tgbound.methods import (
    ApproveChatJoinRequest,
    DeclineChatJoinRequest,
    GetUserProfilePhotos,
    SendMessage,
)
from tgbound.models import Message, MessageEntity, ReplyMarkup, User, UserProfilePhotos


async def pm(
    user: User,
    text: str,
    *,
    parse_mode: Optional[ParseMode] = None,
    entities: Optional[List[MessageEntity]] = None,
    disable_web_page_preview: Optional[bool] = None,
    disable_notification: Optional[bool] = None,
    protect_content: Optional[bool] = None,
    reply_to_message_id: Optional[int] = None,
    allow_sending_without_reply: Optional[bool] = None,
    reply_markup: Optional[ReplyMarkup] = None,
) -> Message:
    """Send a private text message to *user*.

    Works only once the user has started a conversation with the bot.
    """
    client = resolve(user)
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
            chat_id=user.id,
            text=text,
            entities=entities,
            reply_to_message_id=reply_to_message_id,
            reply_markup=reply_markup,
            **params,
        )
    )


async def get_profile_photos(
    user: User,
    *,
    offset: Optional[int] = None,
    limit: Optional[int] = None,
) -> UserProfilePhotos:
    return await resolve(user).submit(GetUserProfilePhotos(user_id=user.id, offset=offset, limit=limit))


async def approve_join_request(user: User, chat_id: Union[int, str]) -> bool:
    """Approve the pending request of *user* to join *chat_id*."""
    return await resolve(user).submit(ApproveChatJoinRequest(chat_id=chat_id, user_id=user.id))


async def decline_join_request(user: User, chat_id: Union[int, str]) -> bool:
    return await resolve(user).submit(DeclineChatJoinRequest(chat_id=chat_id, user_id=user.id))
