"""Typed Telegram Bot API client whose entities know the client they came from.

Every entity materialised from a response is bound to the
:class:`BotClient` that received it, so actions can be invoked on the
entity alone::

    from tgbound import BotClient, ClientDefaults, ParseMode, extract_message
    from tgbound.actions import message as message_actions

    client = BotClient.from_token(token, defaults=ClientDefaults(parse_mode=ParseMode.HTML))
    for update in await client.get_updates():
        msg, ok = extract_message(update)
        if ok:
            await message_actions.reply_text(msg, "<b>pong</b>")
"""

from tgbound.carrier import ClientCarrier, attach, is_attached, propagate, resolve
from tgbound.client import BotClient
from tgbound.defaults import ClientDefaults, ParseMode, apply_defaults, overlay
from tgbound.exceptions import APIException, InvalidStateError, MalformedEnvelopeError, MissingClientError
from tgbound.mentions import escape_markup, text_mention
from tgbound.targets import ChatMessageTarget, InlineMessageTarget, resolve_target
from tgbound.updates import (
    UpdateType,
    extract_as,
    extract_callback_query,
    extract_channel_post,
    extract_chat_join_request,
    extract_chat_member,
    extract_chosen_inline_result,
    extract_edited_channel_post,
    extract_edited_message,
    extract_inline_query,
    extract_message,
    extract_my_chat_member,
    extract_original,
    extract_poll,
    extract_poll_answer,
    extract_pre_checkout_query,
    extract_shipping_query,
    update_type,
)

__all__ = [
    "APIException",
    "BotClient",
    "ChatMessageTarget",
    "ClientCarrier",
    "ClientDefaults",
    "InlineMessageTarget",
    "InvalidStateError",
    "MalformedEnvelopeError",
    "MissingClientError",
    "ParseMode",
    "UpdateType",
    "apply_defaults",
    "attach",
    "escape_markup",
    "extract_as",
    "extract_callback_query",
    "extract_channel_post",
    "extract_chat_join_request",
    "extract_chat_member",
    "extract_chosen_inline_result",
    "extract_edited_channel_post",
    "extract_edited_message",
    "extract_inline_query",
    "extract_message",
    "extract_my_chat_member",
    "extract_original",
    "extract_poll",
    "extract_poll_answer",
    "extract_pre_checkout_query",
    "extract_shipping_query",
    "is_attached",
    "overlay",
    "propagate",
    "resolve",
    "resolve_target",
    "text_mention",
    "update_type",
]
