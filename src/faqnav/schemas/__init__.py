"""Shared schemas for faqnav."""

from faqnav.schemas.navigation import NavigationState, SubjectKind, SubjectSelection
from faqnav.schemas.records import FaqRecord
from faqnav.schemas.tree import Category, FaqTree, Question, Section, Subject
from faqnav.schemas.view import (
    CategoryLink,
    PageView,
    QuestionEntry,
    SectionEntry,
    SubjectLink,
)

__all__ = [
    "Category",
    "CategoryLink",
    "FaqRecord",
    "FaqTree",
    "NavigationState",
    "PageView",
    "Question",
    "QuestionEntry",
    "Section",
    "SectionEntry",
    "Subject",
    "SubjectKind",
    "SubjectLink",
    "SubjectSelection",
]
