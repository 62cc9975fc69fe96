"""Actions bound to a received :class:`~tgbound.models.ShippingQuery`."""

from __future__ import annotations

from typing import List

from tgbound.carrier import resolve
from tgbound.methods import AnswerShippingQuery
from tgbound.models import ShippingOption, ShippingQuery


async def answer(query: ShippingQuery, shipping_options: List[ShippingOption]) -> bool:
    """Accept the address and offer *shipping_options*."""
    return await resolve(query).submit(
        AnswerShippingQuery(shipping_query_id=query.id, ok=True, shipping_options=shipping_options)
    )


async def answer_error(query: ShippingQuery, error_message: str) -> bool:
    """Refuse delivery to the given address, explaining why."""
    return await resolve(query).submit(
        AnswerShippingQuery(shipping_query_id=query.id, ok=False, error_message=error_message)
    )
