"""FAQ tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator


class Question(BaseModel):
    """A question leaf."""

    model_config = ConfigDict(frozen=True)

    id: int
    question: str
    answer: str


class Subject(BaseModel):
    """A subject grouping questions inside a subject-bearing section."""

    model_config = ConfigDict(frozen=True)

    name: str
    questions: tuple[Question, ...] = ()


class Section(BaseModel):
    """A section holding either subjects or questions, never both."""

    model_config = ConfigDict(frozen=True)

    name: str
    subjects: tuple[Subject, ...] | None = None
    questions: tuple[Question, ...] | None = None

    @model_validator(mode="after")
    def check_shape(self) -> Section:
        if (self.subjects is None) == (self.questions is None):
            raise ValueError(f"section {self.name!r} must hold either subjects or questions")
        return self

    @property
    def is_subject_bearing(self) -> bool:
        return self.subjects is not None


class Category(BaseModel):
    """A top-level category."""

    model_config = ConfigDict(frozen=True)

    name: str
    sections: tuple[Section, ...] = ()


class FaqTree(BaseModel):
    """Nested view over the flat record list, in first-seen order."""

    model_config = ConfigDict(frozen=True)

    categories: tuple[Category, ...] = ()
