"""Fold flat FAQ records into a category/section/subject/question tree."""

from __future__ import annotations

from typing import Iterable

from faqnav.exceptions import StructuralInconsistencyError
from faqnav.schemas import Category, FaqRecord, FaqTree, Question, Section, Subject

# section name -> subject name -> questions, or section name -> questions.
_SectionDraft = dict[str, list[Question]] | list[Question]


def build_faq_tree(records: Iterable[FaqRecord], *, category: str | None = None) -> FaqTree:
    """Build the nested FAQ tree from records in their original order.

    Categories, sections and subjects appear in the order they are first
    seen. A section is subject-bearing or subject-free depending on its
    first record; a later record of the other kind is a data error.

    Args:
        records: Flat records in store order.
        category: If given, only records of this category are aggregated.

    Returns:
        The tree. Empty when no record matches.

    Raises:
        StructuralInconsistencyError: If a section mixes records with and
            without a subject.
    """
    drafts: dict[str, dict[str, _SectionDraft]] = {}

    for record in records:
        if category is not None and record.category != category:
            continue

        sections = drafts.setdefault(record.category, {})
        question = Question(id=record.id, question=record.question, answer=record.answer)
        draft = sections.get(record.section)

        if record.subject is None:
            if isinstance(draft, dict):
                raise StructuralInconsistencyError(
                    f"Record {record.id} has no subject but section "
                    f"{record.category!r} / {record.section!r} has subjects"
                )
            sections.setdefault(record.section, []).append(question)
        else:
            if isinstance(draft, list):
                raise StructuralInconsistencyError(
                    f"Record {record.id} has subject {record.subject!r} but section "
                    f"{record.category!r} / {record.section!r} has none"
                )
            subjects = sections.setdefault(record.section, {})
            subjects.setdefault(record.subject, []).append(question)

    return FaqTree(
        categories=tuple(
            Category(name=name, sections=tuple(_build_section(section, draft) for section, draft in sections.items()))
            for name, sections in drafts.items()
        )
    )


def _build_section(name: str, draft: _SectionDraft) -> Section:
    if isinstance(draft, dict):
        return Section(
            name=name,
            subjects=tuple(Subject(name=subject, questions=tuple(questions)) for subject, questions in draft.items()),
        )
    return Section(name=name, questions=tuple(draft))


def count_leaves(tree: FaqTree) -> int:
    """Count the questions held by the tree."""
    total = 0
    for category in tree.categories:
        for section in category.sections:
            if section.subjects is not None:
                total += sum(len(subject.questions) for subject in section.subjects)
            else:
                total += len(section.questions or ())
    return total


def list_categories(records: Iterable[FaqRecord]) -> list[str]:
    """Distinct category names in first-seen order."""
    return list(dict.fromkeys(record.category for record in records))
