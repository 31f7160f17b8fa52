"""Tests for the lookup index."""

from __future__ import annotations

from faqnav.lookup import LookupIndex
from faqnav.schemas import FaqRecord


class TestLookupIndex:
    """Tests for LookupIndex queries."""

    def test_first_in_category(self, records: list[FaqRecord]) -> None:
        index = LookupIndex(records)
        assert index.first_in_category("Account").id == 6
        assert index.first_in_category("Nope") is None

    def test_first_in_section(self, records: list[FaqRecord]) -> None:
        index = LookupIndex(records)
        assert index.first_in_section("Billing", "Payments").id == 3
        assert index.first_in_section("Account", "Payments") is None

    def test_first_in_subject(self, records: list[FaqRecord]) -> None:
        """Subject lookups accept None for subject-free sections."""
        index = LookupIndex(records)
        assert index.first_in_subject("Billing", "Payments", "Cards").id == 5
        assert index.first_in_subject("Billing", "Invoices", None).id == 1
        assert index.first_in_subject("Billing", "Payments", None) is None

    def test_find_requires_full_tuple(self, records: list[FaqRecord]) -> None:
        index = LookupIndex(records)
        assert index.find("Billing", "Payments", "Refunds", "Can I cancel a refund?").id == 4
        assert index.find("Billing", "Payments", "Cards", "Can I cancel a refund?") is None

    def test_find_by_question_keeps_store_order(self, records: list[FaqRecord]) -> None:
        """The first record with a shared question text is returned."""
        assert LookupIndex(records).find_by_question("How do I pay?").id == 1
        assert LookupIndex(list(reversed(records))).find_by_question("How do I pay?").id == 9

    def test_get_by_id(self, records: list[FaqRecord]) -> None:
        index = LookupIndex(records)
        assert index.get(7).question == "How do I enable two-factor?"
        assert index.get(99) is None

    def test_categories_in_load_order(self, records: list[FaqRecord]) -> None:
        assert LookupIndex(records).categories() == ["Billing", "Account"]
