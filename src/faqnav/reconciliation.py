"""Resolve arbitrary navigation requests to valid, fully specified states.

``reconcile`` runs a fixed sequence of checks against the record store and
stops at the first one that fails, returning the corrected state the caller
should adopt (typically by redirecting). ``settle`` repeats it until the
state is valid.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Final, Union

from faqnav.exceptions import EmptyDatasetError, UnresolvableStateError
from faqnav.schemas import FaqRecord, NavigationState
from faqnav.store import RecordStore

logger = logging.getLogger(__name__)

MAX_RECONCILE_PASSES: Final[int] = 6


class Correction(str, Enum):
    """Which check produced a correction."""

    ORPHAN_QUESTION = "orphan_question"
    CATEGORY = "category"
    SECTION = "section"
    MISSING_SUBJECT = "missing_subject"
    SUBJECT = "subject"
    QUESTION = "question"


@dataclass(frozen=True)
class Pending:
    """The store has not been loaded; no decision yet."""


@dataclass(frozen=True)
class Valid:
    """The state is valid and can be rendered."""

    state: NavigationState


@dataclass(frozen=True)
class Correct:
    """The state must be replaced by ``state``, taken from ``record``."""

    state: NavigationState
    correction: Correction
    record: FaqRecord


Decision = Union[Pending, Valid, Correct]


@dataclass
class Settlement:
    """Outcome of running reconciliation to a fixed point.

    ``state`` is ``None`` while the store is pending.
    """

    state: NavigationState | None
    corrections: list[Correct] = field(default_factory=list)


def reconcile(state: NavigationState, store: RecordStore) -> Decision:
    """Decide whether ``state`` is valid or compute its correction.

    Raises:
        EmptyDatasetError: If the store loaded zero records.
    """
    if not store.is_loaded:
        return Pending()
    if not store.records:
        raise EmptyDatasetError("expected at least one FAQ record")

    index = store.index
    category, section, question = state.category, state.section, state.question

    if question and (not category or not section):
        record = index.find_by_question(question)
        if record is not None:
            return _correct(state, record, Correction.ORPHAN_QUESTION)

    first_in_category = index.first_in_category(category) if category else None
    if first_in_category is None:
        return _correct(state, store.records[0], Correction.CATEGORY)

    first_in_section = index.first_in_section(category, section) if section else None
    if first_in_section is None:
        return _correct(state, first_in_category, Correction.SECTION)

    if state.subject.is_absent and first_in_section.subject is not None:
        return _correct(state, first_in_section, Correction.MISSING_SUBJECT)

    subject = state.subject.value
    first_in_subject = index.first_in_subject(category, section, subject) if state.subject.is_named else None
    if state.subject.is_named and first_in_subject is None:
        return _correct(state, first_in_section, Correction.SUBJECT)

    if not question or index.find(category, section, subject, question) is None:
        return _correct(state, first_in_subject or first_in_section, Correction.QUESTION)

    return Valid(state)


def settle(
    state: NavigationState,
    store: RecordStore,
    *,
    max_passes: int = MAX_RECONCILE_PASSES,
) -> Settlement:
    """Apply corrections until ``state`` is valid.

    Raises:
        EmptyDatasetError: If the store loaded zero records.
        UnresolvableStateError: If no valid state is reached in ``max_passes``.
    """
    corrections: list[Correct] = []
    current = state
    for _ in range(max_passes):
        decision = reconcile(current, store)
        if isinstance(decision, Pending):
            return Settlement(state=None, corrections=corrections)
        if isinstance(decision, Valid):
            return Settlement(state=decision.state, corrections=corrections)
        corrections.append(decision)
        current = decision.state

    raise UnresolvableStateError(f"navigation state did not settle after {max_passes} passes: {current!r}")


def _correct(state: NavigationState, record: FaqRecord, correction: Correction) -> Correct:
    corrected = NavigationState.from_record(record)
    logger.debug(
        "Navigation state corrected",
        extra={"correction": correction.value, "requested": state.model_dump(), "record_id": record.id},
    )
    return Correct(state=corrected, correction=correction, record=record)
