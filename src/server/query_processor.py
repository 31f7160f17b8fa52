"""Turn a navigation request into a page, a redirect or an error."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from faqnav.codec import build_url
from faqnav.exceptions import DatasetError
from faqnav.reconciliation import Correct, Pending, reconcile
from faqnav.schemas import NavigationState, PageView
from faqnav.store import RecordStore
from faqnav.utils.logging_config import get_logger
from faqnav.view import build_page_view
from server.models import ErrorResponse

# Initialize logger for this module
logger = get_logger(__name__)


@dataclass(frozen=True)
class RedirectTarget:
    """The request must be redirected to ``location``."""

    location: str
    correction: str


@dataclass(frozen=True)
class NotReady:
    """Records have not finished loading."""


NavigationOutcome = Union[PageView, RedirectTarget, NotReady, ErrorResponse]


def process_navigation(state: NavigationState, store: RecordStore, *, path: str) -> NavigationOutcome:
    """Reconcile ``state`` once and build the matching outcome.

    Corrections become redirects; the client follows them and the next
    request is reconciled again.
    """
    try:
        decision = reconcile(state, store)
        if isinstance(decision, Pending):
            return NotReady()
        if isinstance(decision, Correct):
            location = build_url(decision.state, path)
            _log_redirect(state, decision, location)
            return RedirectTarget(location=location, correction=decision.correction.value)
        return build_page_view(decision.state, store, path=path)
    except DatasetError as exc:
        _log_error(state, exc)
        return ErrorResponse(error=str(exc))


def _log_redirect(state: NavigationState, decision: Correct, location: str) -> None:
    """Log a corrective redirect.

    Parameters
    ----------
    state : NavigationState
        The state that was requested.
    decision : Correct
        The correction computed for it.
    location : str
        The URL the client is redirected to.

    """
    logger.info(
        "Redirecting navigation request",
        extra={
            "correction": decision.correction.value,
            "requested": state.model_dump(mode="json"),
            "location": location,
        },
    )


def _log_error(state: NavigationState, exc: Exception) -> None:
    """Log a fatal dataset error.

    Parameters
    ----------
    state : NavigationState
        The state that was requested.
    exc : Exception
        The dataset error raised while handling it.

    """
    logger.error(
        "FAQ dataset error",
        extra={
            "requested": state.model_dump(mode="json"),
            "error_type": type(exc).__name__,
            "error": str(exc),
        },
    )
