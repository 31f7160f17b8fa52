"""Tests for the navigation state codec."""

from __future__ import annotations

import pytest

from conftest import make_record
from faqnav.codec import build_url, decode, encode, encode_query, link_for_record
from faqnav.schemas import NavigationState, SubjectSelection

FULL_STATE = NavigationState(
    category="Billing",
    section="Payments",
    subject=SubjectSelection.named("Refunds"),
    question="How long does a refund take?",
)


class TestEncode:
    """Tests for encode and encode_query."""

    def test_keys_in_fixed_order(self) -> None:
        """Pairs follow category, section, subject, question order."""
        assert [key for key, _ in encode(FULL_STATE)] == ["category", "section", "subject", "question"]

    def test_omits_empty_fields(self) -> None:
        """Empty fields are left out."""
        assert encode(NavigationState(category="Billing")) == [("category", "Billing")]

    @pytest.mark.parametrize("subject", [SubjectSelection.absent(), SubjectSelection.none()])
    def test_absent_and_none_subject_are_omitted(self, subject: SubjectSelection) -> None:
        """Neither absent nor explicit-none subjects reach the URL."""
        state = NavigationState(category="Billing", section="Invoices", subject=subject, question="How do I pay?")
        assert "subject" not in dict(encode(state))

    def test_query_is_form_encoded(self) -> None:
        """Spaces become '+' and reserved characters are escaped."""
        state = NavigationState(category="Billing", section="Invoices", question="How do I pay?")
        assert encode_query(state) == "category=Billing&section=Invoices&question=How+do+I+pay%3F"


class TestDecode:
    """Tests for decode."""

    def test_empty_query(self) -> None:
        """An empty query yields an empty state."""
        assert decode("") == NavigationState()
        assert decode("").is_empty

    def test_leading_question_mark_and_percent_escapes(self) -> None:
        """A '?' prefix is accepted and %20 decodes to a space."""
        state = decode("?question=How%20do%20I%20pay%3F")
        assert state.question == "How do I pay?"
        assert state.category == ""

    def test_empty_values_are_absent(self) -> None:
        """Empty parameters count as missing."""
        state = decode("category=&section=Invoices&subject=")
        assert state.category == ""
        assert state.section == "Invoices"
        assert state.subject.is_absent

    def test_present_subject_is_named(self) -> None:
        """A subject parameter decodes to a named subject."""
        assert decode("subject=Refunds").subject == SubjectSelection.named("Refunds")

    def test_unknown_keys_ignored_and_first_value_wins(self) -> None:
        """Extra parameters are dropped and repeated keys keep their first value."""
        state = decode("utm_source=mail&category=Billing&category=Account")
        assert state == NavigationState(category="Billing")

    def test_accepts_mapping(self) -> None:
        """A parameter mapping decodes like a query string."""
        state = decode({"category": "Billing", "section": "", "question": "How do I pay?"})
        assert state == NavigationState(category="Billing", question="How do I pay?")


class TestRoundTrip:
    """decode(encode(s)) == s for fully populated or fully empty states."""

    @pytest.mark.parametrize(
        "state",
        [
            NavigationState(),
            FULL_STATE,
            NavigationState(
                category="Q&A / misc",
                section="100% = sure?",
                subject=SubjectSelection.named("a+b c"),
                question="What about 'quotes' & #hashes?",
            ),
        ],
    )
    def test_round_trip(self, state: NavigationState) -> None:
        """Encoding then decoding restores the state."""
        assert decode(encode_query(state)) == state
        assert decode(dict(encode(state))) == state


class TestLinks:
    """Tests for URL and link building."""

    def test_build_url_without_query(self) -> None:
        """An empty state links to the bare path."""
        assert build_url(NavigationState(), "/faq") == "/faq"

    def test_link_for_subject_free_record(self) -> None:
        """Subject-free records produce links without a subject."""
        record = make_record(1, "Billing", "Invoices", None, "How do I pay?")
        assert link_for_record(record, "/faq") == "/faq?category=Billing&section=Invoices&question=How+do+I+pay%3F"

    def test_link_for_subject_record(self) -> None:
        """Subject-bearing records carry their subject."""
        record = make_record(3, "Billing", "Payments", "Refunds", "Why?")
        assert link_for_record(record) == "/?category=Billing&section=Payments&subject=Refunds&question=Why%3F"
