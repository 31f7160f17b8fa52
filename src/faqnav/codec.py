"""Mapping between navigation states and URL query strings."""

from __future__ import annotations

from typing import Final, Mapping
from urllib.parse import parse_qsl, urlencode

from faqnav.schemas import FaqRecord, NavigationState, SubjectSelection

QUERY_KEYS: Final[tuple[str, ...]] = ("category", "section", "subject", "question")


def encode(state: NavigationState) -> list[tuple[str, str]]:
    """Serialize a state into ordered query pairs, omitting empty fields.

    Absent and explicit-none subjects are both omitted.
    """
    values = {
        "category": state.category,
        "section": state.section,
        "subject": state.subject.value or "",
        "question": state.question,
    }
    return [(key, values[key]) for key in QUERY_KEYS if values[key]]


def encode_query(state: NavigationState) -> str:
    """Form-encoded query string for ``state`` (no leading ``?``)."""
    return urlencode(encode(state))


def decode(query: str | Mapping[str, str]) -> NavigationState:
    """Parse a query string or parameter mapping into a state.

    Missing keys and empty values yield empty fields. A subject present in
    the query is named; otherwise it is absent. Unknown keys are ignored and
    the first occurrence of a repeated key wins.
    """
    if isinstance(query, str):
        params: dict[str, str] = {}
        for key, value in parse_qsl(query.removeprefix("?"), keep_blank_values=True):
            params.setdefault(key, value)
    else:
        params = dict(query)

    subject = params.get("subject") or ""
    return NavigationState(
        category=params.get("category") or "",
        section=params.get("section") or "",
        subject=SubjectSelection.named(subject) if subject else SubjectSelection.absent(),
        question=params.get("question") or "",
    )


def build_url(state: NavigationState, path: str = "/") -> str:
    """URL for ``state`` under ``path``."""
    query = encode_query(state)
    return f"{path}?{query}" if query else path


def link_for_record(record: FaqRecord, path: str = "/") -> str:
    """Shareable link that selects ``record``."""
    return build_url(NavigationState.from_record(record), path)
