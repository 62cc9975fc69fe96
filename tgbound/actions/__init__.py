"""Bound actions: free async functions taking a received entity as receiver.

Each action resolves the client its receiver came from, overlays the
client's defaults on the parameters left unspecified, builds one request
and submits it::

    from tgbound.actions import message as message_actions

    await message_actions.reply_text(msg, "pong", as_reply=True)

Calling an action on an entity that was never bound to a client raises
:class:`~tgbound.exceptions.MissingClientError` before anything is sent.
"""

from tgbound.actions import (
    callback_query,
    chat,
    chat_join_request,
    inline_query,
    message,
    pre_checkout_query,
    shipping_query,
    user,
)

__all__ = [
    "callback_query",
    "chat",
    "chat_join_request",
    "inline_query",
    "message",
    "pre_checkout_query",
    "shipping_query",
    "user",
]
