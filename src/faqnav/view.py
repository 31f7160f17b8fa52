"""Build the presentation contract for a confirmed navigation state."""

from __future__ import annotations

from faqnav.aggregation import build_faq_tree
from faqnav.codec import link_for_record
from faqnav.config import FAQNAV_BASE_PATH
from faqnav.schemas import (
    CategoryLink,
    NavigationState,
    PageView,
    QuestionEntry,
    SectionEntry,
    SubjectLink,
)
from faqnav.store import RecordStore


def build_page_view(state: NavigationState, store: RecordStore, *, path: str = FAQNAV_BASE_PATH) -> PageView:
    """Assemble categories, the section menu and the question list.

    ``state`` must already be confirmed by reconciliation. The section menu
    comes from the tree of the selected category, so structural errors in
    that category propagate.

    Raises:
        StructuralInconsistencyError: If a section of the category mixes
            records with and without a subject.
    """
    index = store.index

    categories = [
        CategoryLink(name=name, url=link_for_record(index.first_in_category(name), path), active=name == state.category)
        for name in index.categories()
    ]

    sections: list[SectionEntry] = []
    tree = build_faq_tree(store.records, category=state.category)
    for category in tree.categories:
        for section in category.sections:
            active = section.name == state.section
            if section.subjects is None:
                first = index.first_in_section(category.name, section.name)
                sections.append(SectionEntry(name=section.name, url=link_for_record(first, path), active=active))
                continue
            subjects = [
                SubjectLink(
                    name=subject.name,
                    url=link_for_record(index.first_in_subject(category.name, section.name, subject.name), path),
                    active=active and subject.name == state.subject.value,
                )
                for subject in section.subjects
            ]
            sections.append(SectionEntry(name=section.name, active=active, subjects=subjects))

    subject = state.subject.value if state.subject.is_named else None
    questions = [
        QuestionEntry(
            id=record.id,
            question=record.question,
            answer=record.answer,
            url=link_for_record(record, path),
            active=record.question == state.question,
        )
        for record in store.records
        if record.category == state.category and record.section == state.section and record.subject == subject
    ]

    return PageView(state=state, categories=categories, sections=sections, questions=questions)
