"""Narrowing an :class:`~tgbound.models.Update` envelope to its payload.

The Bot API encodes a tagged union as one object with a slot per event
kind, of which at most one is populated.  This module is the only place
that knows how to read it:

* no slot populated is legal and yields :attr:`UpdateType.UNKNOWN`
  (an event kind this library does not model yet);
* more than one populated slot raises :class:`MalformedEnvelopeError`
  instead of silently picking one.

Nothing here performs I/O.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from tgbound.exceptions import MalformedEnvelopeError
from tgbound.models import (
    CallbackQuery,
    ChatJoinRequest,
    ChatMemberUpdated,
    ChosenInlineResult,
    InlineQuery,
    Message,
    Poll,
    PollAnswer,
    PreCheckoutQuery,
    ShippingQuery,
    Update,
)


class UpdateType(str, Enum):
    """Payload kinds an update can carry.  Values are the slot names."""

    UNKNOWN = "unknown"
    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CHOSEN_INLINE_RESULT = "chosen_inline_result"
    CALLBACK_QUERY = "callback_query"
    SHIPPING_QUERY = "shipping_query"
    PRE_CHECKOUT_QUERY = "pre_checkout_query"
    POLL = "poll"
    POLL_ANSWER = "poll_answer"
    MY_CHAT_MEMBER = "my_chat_member"
    CHAT_MEMBER = "chat_member"
    CHAT_JOIN_REQUEST = "chat_join_request"


SLOTS: Tuple[UpdateType, ...] = tuple(kind for kind in UpdateType if kind is not UpdateType.UNKNOWN)


def populated_slots(update: Update) -> List[UpdateType]:
    """Return every slot of *update* that holds a payload."""
    return [kind for kind in SLOTS if getattr(update, kind.value) is not None]


def update_type(update: Update) -> UpdateType:
    """Return the kind of payload *update* carries.

    Raises:
        MalformedEnvelopeError: If more than one slot is populated.
    """
    slots = populated_slots(update)
    if len(slots) > 1:
        raise MalformedEnvelopeError(update.update_id, [kind.value for kind in slots])
    if not slots:
        return UpdateType.UNKNOWN
    return slots[0]


def payload_of(update: Update) -> Tuple[UpdateType, Optional[Any]]:
    """Return ``(kind, payload)``; the payload is ``None`` for ``UNKNOWN``."""
    kind = update_type(update)
    if kind is UpdateType.UNKNOWN:
        return kind, None
    return kind, getattr(update, kind.value)


def extract_as(update: Update, kind: Union[UpdateType, str]) -> Tuple[Optional[Any], bool]:
    """Return ``(payload, True)`` if *update* carries a *kind* payload.

    *kind* may also be given as its slot name (``"message"``); a name that
    is not a slot raises :class:`ValueError`.  Every other case, including
    an update with no payload at all, returns ``(None, False)``.  A malformed
    envelope still raises.
    """
    kind = UpdateType(kind)
    actual, payload = payload_of(update)
    if kind == UpdateType.UNKNOWN or actual != kind:
        return None, False
    return payload, True


def extract_original(update: Update, kind: Union[UpdateType, str]) -> Tuple[Optional[Any], bool]:
    """Read the *kind* slot directly, without scanning the other slots.

    For callers that already know the expected kind from an out-of-band tag
    (for example a webhook route per update type).
    """
    kind = UpdateType(kind)
    if kind == UpdateType.UNKNOWN:
        return None, False
    payload = getattr(update, kind.value)
    return payload, payload is not None


# ── Per-kind shortcuts ───────────────────────────────────────────────────────


def extract_message(update: Update) -> Tuple[Optional[Message], bool]:
    return extract_as(update, UpdateType.MESSAGE)


def extract_edited_message(update: Update) -> Tuple[Optional[Message], bool]:
    return extract_as(update, UpdateType.EDITED_MESSAGE)


def extract_channel_post(update: Update) -> Tuple[Optional[Message], bool]:
    return extract_as(update, UpdateType.CHANNEL_POST)


def extract_edited_channel_post(update: Update) -> Tuple[Optional[Message], bool]:
    return extract_as(update, UpdateType.EDITED_CHANNEL_POST)


def extract_inline_query(update: Update) -> Tuple[Optional[InlineQuery], bool]:
    return extract_as(update, UpdateType.INLINE_QUERY)


def extract_chosen_inline_result(update: Update) -> Tuple[Optional[ChosenInlineResult], bool]:
    return extract_as(update, UpdateType.CHOSEN_INLINE_RESULT)


def extract_callback_query(update: Update) -> Tuple[Optional[CallbackQuery], bool]:
    return extract_as(update, UpdateType.CALLBACK_QUERY)


def extract_shipping_query(update: Update) -> Tuple[Optional[ShippingQuery], bool]:
    return extract_as(update, UpdateType.SHIPPING_QUERY)


def extract_pre_checkout_query(update: Update) -> Tuple[Optional[PreCheckoutQuery], bool]:
    return extract_as(update, UpdateType.PRE_CHECKOUT_QUERY)


def extract_poll(update: Update) -> Tuple[Optional[Poll], bool]:
    return extract_as(update, UpdateType.POLL)


def extract_poll_answer(update: Update) -> Tuple[Optional[PollAnswer], bool]:
    return extract_as(update, UpdateType.POLL_ANSWER)


def extract_my_chat_member(update: Update) -> Tuple[Optional[ChatMemberUpdated], bool]:
    return extract_as(update, UpdateType.MY_CHAT_MEMBER)


def extract_chat_member(update: Update) -> Tuple[Optional[ChatMemberUpdated], bool]:
    return extract_as(update, UpdateType.CHAT_MEMBER)


def extract_chat_join_request(update: Update) -> Tuple[Optional[ChatJoinRequest], bool]:
    return extract_as(update, UpdateType.CHAT_JOIN_REQUEST)
