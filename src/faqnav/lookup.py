"""Order-preserving lookups over the record list."""

from __future__ import annotations

from typing import Iterable, TypeVar

from faqnav.schemas import FaqRecord

_K = TypeVar("_K")

SubjectKey = tuple[str, str, str | None]
RecordKey = tuple[str, str, str | None, str]


class LookupIndex:
    """Read-only queries over a fixed record sequence.

    Each map keeps the first record seen for its key, so every ``first_*``
    query answers in store order.
    """

    def __init__(self, records: Iterable[FaqRecord]) -> None:
        self._by_category: dict[str, FaqRecord] = {}
        self._by_section: dict[tuple[str, str], FaqRecord] = {}
        self._by_subject: dict[SubjectKey, FaqRecord] = {}
        self._by_key: dict[RecordKey, FaqRecord] = {}
        self._by_question: dict[str, FaqRecord] = {}
        self._by_id: dict[int, FaqRecord] = {}

        for record in records:
            _keep_first(self._by_category, record.category, record)
            _keep_first(self._by_section, (record.category, record.section), record)
            _keep_first(self._by_subject, (record.category, record.section, record.subject), record)
            _keep_first(self._by_key, record.key, record)
            _keep_first(self._by_question, record.question, record)
            _keep_first(self._by_id, record.id, record)

    def first_in_category(self, category: str) -> FaqRecord | None:
        return self._by_category.get(category)

    def first_in_section(self, category: str, section: str) -> FaqRecord | None:
        return self._by_section.get((category, section))

    def first_in_subject(self, category: str, section: str, subject: str | None) -> FaqRecord | None:
        return self._by_subject.get((category, section, subject))

    def find(self, category: str, section: str, subject: str | None, question: str) -> FaqRecord | None:
        """Exact record for a full (category, section, subject, question) tuple."""
        return self._by_key.get((category, section, subject, question))

    def find_by_question(self, question: str) -> FaqRecord | None:
        """First record, in any category, whose question text matches exactly."""
        return self._by_question.get(question)

    def get(self, record_id: int) -> FaqRecord | None:
        return self._by_id.get(record_id)

    def categories(self) -> list[str]:
        """Distinct categories in first-seen order."""
        return list(self._by_category)


def _keep_first(mapping: dict[_K, FaqRecord], key: _K, record: FaqRecord) -> None:
    if key not in mapping:
        mapping[key] = record
