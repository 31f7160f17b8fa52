"""Navigation state models."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from faqnav.schemas.records import FaqRecord


class SubjectKind(str, Enum):
    """How the subject appears in a navigation state."""

    ABSENT = "absent"
    NONE = "none"
    NAMED = "named"


class SubjectSelection(BaseModel):
    """Three-valued subject field.

    ``ABSENT`` means the URL carried no subject, ``NONE`` means no subject is
    expected (the section is subject-free) and ``NAMED`` carries the subject.
    """

    model_config = ConfigDict(frozen=True)

    kind: SubjectKind = SubjectKind.ABSENT
    name: str | None = None

    @model_validator(mode="after")
    def check_name(self) -> SubjectSelection:
        if self.kind is SubjectKind.NAMED and not self.name:
            raise ValueError("a named subject requires a non-empty name")
        if self.kind is not SubjectKind.NAMED and self.name is not None:
            raise ValueError(f"a {self.kind.value} subject cannot carry a name")
        return self

    @classmethod
    def absent(cls) -> SubjectSelection:
        return cls(kind=SubjectKind.ABSENT)

    @classmethod
    def none(cls) -> SubjectSelection:
        return cls(kind=SubjectKind.NONE)

    @classmethod
    def named(cls, name: str) -> SubjectSelection:
        return cls(kind=SubjectKind.NAMED, name=name)

    @classmethod
    def from_value(cls, value: str | None) -> SubjectSelection:
        """Build the selection a record with subject ``value`` implies."""
        return cls.none() if value is None else cls.named(value)

    @property
    def is_absent(self) -> bool:
        return self.kind is SubjectKind.ABSENT

    @property
    def is_named(self) -> bool:
        return self.kind is SubjectKind.NAMED

    @property
    def value(self) -> str | None:
        """The subject name, or ``None`` for absent and explicit-none selections."""
        return self.name


class NavigationState(BaseModel):
    """Selected category, section, subject and question.

    Empty strings stand for fields missing from the URL.
    """

    model_config = ConfigDict(frozen=True)

    category: str = ""
    section: str = ""
    subject: SubjectSelection = Field(default_factory=SubjectSelection.absent)
    question: str = ""

    @classmethod
    def from_record(cls, record: FaqRecord) -> NavigationState:
        """Fully specified state pointing at ``record``."""
        return cls(
            category=record.category,
            section=record.section,
            subject=SubjectSelection.from_value(record.subject),
            question=record.question,
        )

    @property
    def is_empty(self) -> bool:
        return not (self.category or self.section or self.subject.is_named or self.question)
