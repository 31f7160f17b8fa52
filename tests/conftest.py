"""Test setup for faqnav."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from faqnav.schemas import FaqRecord  # noqa: E402
from faqnav.store import RecordStore  # noqa: E402


def make_record(
    record_id: int,
    category: str,
    section: str,
    subject: str | None,
    question: str,
    answer: str | None = None,
) -> FaqRecord:
    return FaqRecord(
        id=record_id,
        category=category,
        section=section,
        subject=subject,
        question=question,
        answer=answer or f"Answer {record_id}",
    )


@pytest.fixture
def records() -> list[FaqRecord]:
    """A small dataset mixing subject-free and subject-bearing sections."""
    return [
        make_record(1, "Billing", "Invoices", None, "How do I pay?"),
        make_record(2, "Billing", "Invoices", None, "Where can I find my invoices?"),
        make_record(3, "Billing", "Payments", "Refunds", "How long does a refund take?"),
        make_record(4, "Billing", "Payments", "Refunds", "Can I cancel a refund?"),
        make_record(5, "Billing", "Payments", "Cards", "Which cards are accepted?"),
        make_record(6, "Account", "Security", "Passwords", "How do I reset my password?"),
        make_record(7, "Account", "Security", "Two-factor", "How do I enable two-factor?"),
        make_record(8, "Account", "Profile", None, "How do I change my name?"),
        make_record(9, "Account", "Profile", None, "How do I pay?"),
    ]


@pytest.fixture
def store(records: list[FaqRecord]) -> RecordStore:
    return RecordStore(records)


@pytest.fixture
def dataset_path() -> Path:
    """Sample dataset shipped with the repository."""
    return ROOT / "data" / "faq.json"
