"""Actions bound to a received :class:`~tgbound.models.ChatJoinRequest`."""

from __future__ import annotations

from tgbound.carrier import resolve
from tgbound.methods import ApproveChatJoinRequest, DeclineChatJoinRequest
from tgbound.models import ChatJoinRequest


async def approve(request: ChatJoinRequest) -> bool:
    """Let the requesting user into the chat."""
    return await resolve(request).submit(
        ApproveChatJoinRequest(chat_id=request.chat.id, user_id=request.from_field.id)
    )


async def decline(request: ChatJoinRequest) -> bool:
    return await resolve(request).submit(
        DeclineChatJoinRequest(chat_id=request.chat.id, user_id=request.from_field.id)
    )
