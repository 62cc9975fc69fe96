"""Dual-target resolution for edit-style actions.

A callback query (or a chosen inline result) points at either a message in
a chat or an inline message that has no chat/message-id pair.  The Bot API
exposes one method for both but answers differently: the chat-addressed
call returns the edited :class:`~tgbound.models.Message`, the inline one
only ``true``.  Callers get ``Optional[Message]`` back, ``None`` meaning
"edited, but no message is available for inline targets".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from tgbound.exceptions import InvalidStateError
from tgbound.methods import BotRequest
from tgbound.models import Message

if TYPE_CHECKING:
    from tgbound.client import BotClient

MISSING_TARGET = (
    "an action requires the event to carry a chat message or an inline message identifier, "
    "and neither was present"
)


@dataclass(frozen=True)
class ChatMessageTarget:
    chat_id: Union[int, str]
    message_id: int


@dataclass(frozen=True)
class InlineMessageTarget:
    inline_message_id: str


Target = Union[ChatMessageTarget, InlineMessageTarget]


def resolve_target(source: Any) -> Target:
    """Work out which message an action on *source* should address.

    *source* is any object with ``message`` and/or ``inline_message_id``
    attributes.  A chat message takes precedence.

    Raises:
        InvalidStateError: If *source* carries neither.
    """
    message = getattr(source, "message", None)
    if message is not None:
        return ChatMessageTarget(chat_id=message.chat.id, message_id=message.message_id)
    inline_message_id = getattr(source, "inline_message_id", None)
    if inline_message_id is not None:
        return InlineMessageTarget(inline_message_id=inline_message_id)
    raise InvalidStateError(MISSING_TARGET)


def unify_result(result: Union[Message, bool]) -> Optional[Message]:
    """Map the two response shapes onto ``Optional[Message]``.

    A bare ``True`` acknowledgement becomes ``None``; a message is
    returned as is.
    """
    if isinstance(result, bool):
        return None
    return result


async def submit_to_target(
    client: "BotClient",
    target: Target,
    chat_request: Callable[[Union[int, str], int], BotRequest],
    inline_request: Callable[[str], BotRequest],
) -> Optional[Message]:
    """Build the request variant matching *target*, submit it, unify the result."""
    if isinstance(target, ChatMessageTarget):
        request = chat_request(target.chat_id, target.message_id)
    elif isinstance(target, InlineMessageTarget):
        request = inline_request(target.inline_message_id)
    else:
        raise InvalidStateError(MISSING_TARGET)
    return unify_result(await client.submit(request))
