"""Actions bound to a received :class:`~tgbound.models.InlineQuery`."""

from __future__ import annotations

from typing import List, Optional

from tgbound.carrier import resolve
from tgbound.methods import AnswerInlineQuery
from tgbound.models import InlineQuery, InlineQueryResult


async def answer(
    inline_query: InlineQuery,
    results: List[InlineQueryResult],
    *,
    cache_time: Optional[int] = None,
    is_personal: Optional[bool] = None,
    next_offset: Optional[str] = None,
    switch_pm_text: Optional[str] = None,
    switch_pm_parameter: Optional[str] = None,
) -> bool:
    """Send up to 50 results for *inline_query*."""
    return await resolve(inline_query).submit(
        AnswerInlineQuery(
            inline_query_id=inline_query.id,
            results=results,
            cache_time=cache_time,
            is_personal=is_personal,
            next_offset=next_offset,
            switch_pm_text=switch_pm_text,
            switch_pm_parameter=switch_pm_parameter,
        )
    )
