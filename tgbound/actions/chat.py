"""Actions bound to a received :class:`~tgbound.models.Chat`.

Most of these need the bot to be an administrator of the chat with the
matching right; the Bot API rejects the call otherwise and the rejection
surfaces as :class:`~tgbound.exceptions.APIException`.
"""

from __future__ import annotations

from typing import List, Optional

from tgbound.carrier import resolve
from tgbound.defaults import apply_defaults
from tgbound.methods import (
    ApproveChatJoinRequest,
    BanChatMember,
    BanChatSenderChat,
    CreateChatInviteLink,
    DeclineChatJoinRequest,
    DeleteChatPhoto,
    DeleteChatStickerSet,
    EditChatInviteLink,
    ExportChatInviteLink,
    GetChat,
    GetChatAdministrators,
    GetChatMember,
    GetChatMemberCount,
    LeaveChat,
    PinChatMessage,
    PromoteChatMember,
    RestrictChatMember,
    RevokeChatInviteLink,
    SendChatAction,
    SetChatAdministratorCustomTitle,
    SetChatDescription,
    SetChatPermissions,
    SetChatStickerSet,
    SetChatTitle,
    UnbanChatMember,
    UnbanChatSenderChat,
    UnpinAllChatMessages,
    UnpinChatMessage,
)
from tgbound.models import Chat, ChatInviteLink, ChatMember, ChatPermissions


async def send_chat_action(chat: Chat, action: str) -> bool:
    """Show a status such as ``"typing"`` or ``"upload_photo"`` in *chat*."""
    return await resolve(chat).submit(SendChatAction(chat_id=chat.id, action=action))


# ── Members ──────────────────────────────────────────────────────────────────


async def ban_member(
    chat: Chat,
    user_id: int,
    *,
    until_date: Optional[int] = None,
    revoke_messages: Optional[bool] = None,
) -> bool:
    return await resolve(chat).submit(
        BanChatMember(chat_id=chat.id, user_id=user_id, until_date=until_date, revoke_messages=revoke_messages)
    )


async def unban_member(chat: Chat, user_id: int, *, only_if_banned: Optional[bool] = None) -> bool:
    return await resolve(chat).submit(
        UnbanChatMember(chat_id=chat.id, user_id=user_id, only_if_banned=only_if_banned)
    )


async def restrict_member(
    chat: Chat,
    user_id: int,
    permissions: ChatPermissions,
    *,
    until_date: Optional[int] = None,
) -> bool:
    return await resolve(chat).submit(
        RestrictChatMember(chat_id=chat.id, user_id=user_id, permissions=permissions, until_date=until_date)
    )


async def promote_member(
    chat: Chat,
    user_id: int,
    *,
    is_anonymous: Optional[bool] = None,
    can_manage_chat: Optional[bool] = None,
    can_post_messages: Optional[bool] = None,
    can_edit_messages: Optional[bool] = None,
    can_delete_messages: Optional[bool] = None,
    can_manage_video_chats: Optional[bool] = None,
    can_restrict_members: Optional[bool] = None,
    can_promote_members: Optional[bool] = None,
    can_change_info: Optional[bool] = None,
    can_invite_users: Optional[bool] = None,
    can_pin_messages: Optional[bool] = None,
) -> bool:
    """Promote or demote a user.  Pass ``False`` for every right to demote."""
    return await resolve(chat).submit(
        PromoteChatMember(
            chat_id=chat.id,
            user_id=user_id,
            is_anonymous=is_anonymous,
            can_manage_chat=can_manage_chat,
            can_post_messages=can_post_messages,
            can_edit_messages=can_edit_messages,
            can_delete_messages=can_delete_messages,
            can_manage_video_chats=can_manage_video_chats,
            can_restrict_members=can_restrict_members,
            can_promote_members=can_promote_members,
            can_change_info=can_change_info,
            can_invite_users=can_invite_users,
            can_pin_messages=can_pin_messages,
        )
    )


async def set_administrator_custom_title(chat: Chat, user_id: int, custom_title: str) -> bool:
    return await resolve(chat).submit(
        SetChatAdministratorCustomTitle(chat_id=chat.id, user_id=user_id, custom_title=custom_title)
    )


async def ban_sender_chat(chat: Chat, sender_chat_id: int) -> bool:
    return await resolve(chat).submit(BanChatSenderChat(chat_id=chat.id, sender_chat_id=sender_chat_id))


async def unban_sender_chat(chat: Chat, sender_chat_id: int) -> bool:
    return await resolve(chat).submit(UnbanChatSenderChat(chat_id=chat.id, sender_chat_id=sender_chat_id))


async def set_permissions(chat: Chat, permissions: ChatPermissions) -> bool:
    """Set default permissions for all members."""
    return await resolve(chat).submit(SetChatPermissions(chat_id=chat.id, permissions=permissions))


# ── Invite links and join requests ───────────────────────────────────────────


async def export_invite_link(chat: Chat) -> str:
    """Generate a new primary invite link; the previous one is revoked."""
    return await resolve(chat).submit(ExportChatInviteLink(chat_id=chat.id))


async def create_invite_link(
    chat: Chat,
    *,
    name: Optional[str] = None,
    expire_date: Optional[int] = None,
    member_limit: Optional[int] = None,
    creates_join_request: Optional[bool] = None,
) -> ChatInviteLink:
    return await resolve(chat).submit(
        CreateChatInviteLink(
            chat_id=chat.id,
            name=name,
            expire_date=expire_date,
            member_limit=member_limit,
            creates_join_request=creates_join_request,
        )
    )


async def edit_invite_link(
    chat: Chat,
    invite_link: str,
    *,
    name: Optional[str] = None,
    expire_date: Optional[int] = None,
    member_limit: Optional[int] = None,
    creates_join_request: Optional[bool] = None,
) -> ChatInviteLink:
    return await resolve(chat).submit(
        EditChatInviteLink(
            chat_id=chat.id,
            invite_link=invite_link,
            name=name,
            expire_date=expire_date,
            member_limit=member_limit,
            creates_join_request=creates_join_request,
        )
    )


async def revoke_invite_link(chat: Chat, invite_link: str) -> ChatInviteLink:
    return await resolve(chat).submit(RevokeChatInviteLink(chat_id=chat.id, invite_link=invite_link))


async def approve_join_request(chat: Chat, user_id: int) -> bool:
    return await resolve(chat).submit(ApproveChatJoinRequest(chat_id=chat.id, user_id=user_id))


async def decline_join_request(chat: Chat, user_id: int) -> bool:
    return await resolve(chat).submit(DeclineChatJoinRequest(chat_id=chat.id, user_id=user_id))


# ── Chat settings ────────────────────────────────────────────────────────────


async def delete_photo(chat: Chat) -> bool:
    return await resolve(chat).submit(DeleteChatPhoto(chat_id=chat.id))


async def set_title(chat: Chat, title: str) -> bool:
    return await resolve(chat).submit(SetChatTitle(chat_id=chat.id, title=title))


async def set_description(chat: Chat, description: Optional[str] = None) -> bool:
    return await resolve(chat).submit(SetChatDescription(chat_id=chat.id, description=description))


async def set_sticker_set(chat: Chat, sticker_set_name: str) -> bool:
    return await resolve(chat).submit(SetChatStickerSet(chat_id=chat.id, sticker_set_name=sticker_set_name))


async def delete_sticker_set(chat: Chat) -> bool:
    return await resolve(chat).submit(DeleteChatStickerSet(chat_id=chat.id))


# ── Pinned messages ──────────────────────────────────────────────────────────


async def pin_message(chat: Chat, message_id: int, *, disable_notification: Optional[bool] = None) -> bool:
    client = resolve(chat)
    params = apply_defaults(client.defaults, disable_notification=disable_notification)
    return await client.submit(PinChatMessage(chat_id=chat.id, message_id=message_id, **params))


async def unpin_message(chat: Chat, message_id: Optional[int] = None) -> bool:
    """Unpin *message_id*, or the most recent pinned message when omitted."""
    return await resolve(chat).submit(UnpinChatMessage(chat_id=chat.id, message_id=message_id))


async def unpin_all_messages(chat: Chat) -> bool:
    return await resolve(chat).submit(UnpinAllChatMessages(chat_id=chat.id))


# ── Lookups ──────────────────────────────────────────────────────────────────


async def leave(chat: Chat) -> bool:
    return await resolve(chat).submit(LeaveChat(chat_id=chat.id))


async def get(chat: Chat) -> Chat:
    """Fetch up-to-date information about *chat*."""
    return await resolve(chat).submit(GetChat(chat_id=chat.id))


async def get_administrators(chat: Chat) -> List[ChatMember]:
    return await resolve(chat).submit(GetChatAdministrators(chat_id=chat.id))


async def get_member_count(chat: Chat) -> int:
    return await resolve(chat).submit(GetChatMemberCount(chat_id=chat.id))


async def get_member(chat: Chat, user_id: int) -> ChatMember:
    return await resolve(chat).submit(GetChatMember(chat_id=chat.id, user_id=user_id))
