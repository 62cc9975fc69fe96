"""Actions bound to a received :class:`~tgbound.models.PreCheckoutQuery`.

The Bot API expects an answer within 10 seconds of the query.
"""

from __future__ import annotations

from tgbound.carrier import resolve
from tgbound.methods import AnswerPreCheckoutQuery
from tgbound.models import PreCheckoutQuery


async def answer(query: PreCheckoutQuery) -> bool:
    """Confirm that the order can proceed."""
    return await resolve(query).submit(AnswerPreCheckoutQuery(pre_checkout_query_id=query.id, ok=True))


async def answer_error(query: PreCheckoutQuery, error_message: str) -> bool:
    return await resolve(query).submit(
        AnswerPreCheckoutQuery(pre_checkout_query_id=query.id, ok=False, error_message=error_message)
    )
