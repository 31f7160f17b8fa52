"""Plain-text rendering of FAQ trees."""

from __future__ import annotations

from typing import Iterable

from faqnav.aggregation import count_leaves, list_categories
from faqnav.schemas import FaqRecord, FaqTree, NavigationState, Question

_INDENT = " " * 4
_ACTIVE = "* "
_INACTIVE = "  "


def format_tree(tree: FaqTree, *, state: NavigationState | None = None) -> str:
    """Render the tree as an indented outline.

    Entries on the path selected by ``state`` are prefixed with ``*``.
    """
    lines: list[str] = []
    for category in tree.categories:
        in_category = state is not None and state.category == category.name
        lines.append(_line(0, category.name, in_category))
        for section in category.sections:
            in_section = in_category and state.section == section.name
            lines.append(_line(1, section.name, in_section))
            if section.subjects is not None:
                for subject in section.subjects:
                    in_subject = in_section and state.subject.value == subject.name
                    lines.append(_line(2, subject.name, in_subject))
                    lines.extend(_question_lines(3, subject.questions, state if in_subject else None))
            else:
                lines.extend(_question_lines(2, section.questions or (), state if in_section else None))
    return "\n".join(lines)


def summarize(records: Iterable[FaqRecord], tree: FaqTree) -> str:
    """Short summary of a dataset and its tree."""
    records = list(records)
    sections = sum(len(category.sections) for category in tree.categories)
    subject_bearing = sum(
        1 for category in tree.categories for section in category.sections if section.is_subject_bearing
    )
    summary_lines = [
        f"Records: {len(records)}",
        f"Categories: {len(list_categories(records))}",
        f"Sections: {sections} ({subject_bearing} with subjects)",
        f"Questions: {count_leaves(tree)}",
    ]
    return "\n".join(summary_lines)


def _question_lines(depth: int, questions: Iterable[Question], state: NavigationState | None) -> list[str]:
    return [_line(depth, item.question, state is not None and state.question == item.question) for item in questions]


def _line(depth: int, text: str, active: bool) -> str:
    return _INDENT * depth + (_ACTIVE if active else _INACTIVE) + text
