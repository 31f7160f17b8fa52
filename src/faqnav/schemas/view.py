"""Page view models handed to the presentation layer."""

from __future__ import annotations

from pydantic import BaseModel, Field

from faqnav.schemas.navigation import NavigationState


class CategoryLink(BaseModel):
    """Entry of the category list."""

    name: str
    url: str
    active: bool = False


class SubjectLink(BaseModel):
    """Subject entry below a subject-bearing section."""

    name: str
    url: str
    active: bool = False


class SectionEntry(BaseModel):
    """Entry of the section menu.

    Subject-free sections link to their first question; subject-bearing
    sections are plain labels whose subjects carry the links.
    """

    name: str
    url: str | None = None
    active: bool = False
    subjects: list[SubjectLink] | None = None


class QuestionEntry(BaseModel):
    """A question with its answer and shareable link."""

    id: int
    question: str
    answer: str
    url: str
    active: bool = False


class PageView(BaseModel):
    """Everything needed to render one confirmed navigation state."""

    state: NavigationState
    categories: list[CategoryLink] = Field(default_factory=list)
    sections: list[SectionEntry] = Field(default_factory=list)
    questions: list[QuestionEntry] = Field(default_factory=list)
