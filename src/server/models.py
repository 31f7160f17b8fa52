"""Pydantic response models for the API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class SearchResult(BaseModel):
    """One search hit.

    Attributes
    ----------
    id : int
        Record identifier.
    category : str
        Category of the record.
    section : str
        Section of the record.
    subject : str | None
        Subject of the record, if its section has subjects.
    question : str
        Question text.
    url : str
        Shareable link selecting the record.

    """

    id: int = Field(..., description="Record identifier")
    category: str = Field(..., description="Record category")
    section: str = Field(..., description="Record section")
    subject: str | None = Field(default=None, description="Record subject")
    question: str = Field(..., description="Question text")
    url: str = Field(..., description="Shareable link selecting the record")


class SearchResponse(BaseModel):
    """Response model for the /api/search endpoint.

    Attributes
    ----------
    query : str
        The query as received.
    results : list[SearchResult]
        Matches in store order.
    truncated : bool
        Whether more matches exist than were returned.

    """

    query: str = Field(..., description="Search query")
    results: list[SearchResult] = Field(default_factory=list, description="Matching records")
    truncated: bool = Field(default=False, description="More matches exist than returned")


class RecordLinkResponse(BaseModel):
    """Shareable link for one record."""

    id: int = Field(..., description="Record identifier")
    url: str = Field(..., description="Shareable link selecting the record")


class ErrorResponse(BaseModel):
    """Error response model.

    Attributes
    ----------
    error : str
        Error message describing what went wrong.

    """

    error: str = Field(..., description="Error message")
