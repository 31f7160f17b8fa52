"""FAQ record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FaqRecord(BaseModel):
    """One flat FAQ entry.

    Attributes:
        id: Unique identifier, used for anchors and link lookups.
        category: Top-level grouping.
        section: Grouping inside a category.
        subject: Optional grouping inside a section. Either every record of a
            (category, section) pair has one or none of them do.
        question: Question text, unique within its (category, section, subject).
        answer: Answer text.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    category: str = Field(..., min_length=1)
    section: str = Field(..., min_length=1)
    subject: str | None = None
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)

    @field_validator("subject", mode="before")
    @classmethod
    def empty_subject_is_none(cls, v: str | None) -> str | None:
        """An empty subject cannot survive a URL round trip; store it as ``None``."""
        if isinstance(v, str) and not v:
            return None
        return v

    @property
    def key(self) -> tuple[str, str, str | None, str]:
        """The (category, section, subject, question) tuple identifying the record."""
        return (self.category, self.section, self.subject, self.question)
