"""Question search."""

from __future__ import annotations

from typing import Iterable

from faqnav.schemas import FaqRecord


def search_records(records: Iterable[FaqRecord], query: str) -> list[FaqRecord]:
    """Records whose question contains ``query``, ignoring case, in store order.

    Leading whitespace of the query is ignored; a blank query matches nothing.
    """
    needle = query.lstrip().lower()
    if not needle.strip():
        return []
    return [record for record in records if needle in record.question.lower()]
