"""Tests for plain-text tree rendering."""

from __future__ import annotations

from faqnav.aggregation import build_faq_tree
from faqnav.formatter import format_tree, summarize
from faqnav.schemas import FaqRecord, NavigationState


class TestFormatTree:
    """Tests for format_tree."""

    def test_outline_without_state(self, records: list[FaqRecord]) -> None:
        text = format_tree(build_faq_tree(records, category="Billing"))

        assert text.splitlines() == [
            "  Billing",
            "      Invoices",
            "          How do I pay?",
            "          Where can I find my invoices?",
            "      Payments",
            "          Refunds",
            "              How long does a refund take?",
            "              Can I cancel a refund?",
            "          Cards",
            "              Which cards are accepted?",
        ]

    def test_marks_active_path(self, records: list[FaqRecord]) -> None:
        state = NavigationState.from_record(records[4])
        lines = format_tree(build_faq_tree(records), state=state).splitlines()

        active = [line.strip() for line in lines if line.lstrip().startswith("* ")]
        assert active == ["* Billing", "* Payments", "* Cards", "* Which cards are accepted?"]


def test_summarize(records: list[FaqRecord]) -> None:
    summary = summarize(records, build_faq_tree(records))

    assert summary.splitlines() == [
        "Records: 9",
        "Categories: 2",
        "Sections: 4 (2 with subjects)",
        "Questions: 9",
    ]
