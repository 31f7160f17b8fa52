"""Session navigation over a history of query strings.

Models the browser side of the application: pushing a state appends a
history entry, ``back``/``forward`` re-derive the state from the entry they
land on, and ``settle`` drives reconciliation by pushing every correction.
"""

from __future__ import annotations

from faqnav.codec import build_url, decode, encode_query, link_for_record
from faqnav.config import FAQNAV_BASE_PATH
from faqnav.exceptions import UnresolvableStateError
from faqnav.reconciliation import MAX_RECONCILE_PASSES, Correct, Pending, Settlement, Valid, reconcile
from faqnav.schemas import FaqRecord, NavigationState
from faqnav.store import RecordStore
from faqnav.utils.logging_config import get_logger

logger = get_logger(__name__)


class Navigator:
    """History-backed navigation for one session."""

    def __init__(self, store: RecordStore, *, path: str = FAQNAV_BASE_PATH, query: str = "") -> None:
        self.store = store
        self.path = path
        self._entries: list[str] = [query.removeprefix("?")]
        self._position = 0

    @property
    def query(self) -> str:
        return self._entries[self._position]

    @property
    def state(self) -> NavigationState:
        return decode(self.query)

    @property
    def url(self) -> str:
        return build_url(self.state, self.path)

    @property
    def history(self) -> list[str]:
        return list(self._entries)

    def push(self, state: NavigationState) -> NavigationState:
        """Append ``state`` as the newest history entry, dropping forward entries."""
        del self._entries[self._position + 1 :]
        self._entries.append(encode_query(state))
        self._position += 1
        logger.debug("History push", extra={"url": self.url})
        return self.state

    def navigate_to(self, record: FaqRecord) -> NavigationState:
        return self.push(NavigationState.from_record(record))

    def back(self) -> NavigationState:
        """Move one entry back (a no-op at the oldest entry)."""
        if self._position > 0:
            self._position -= 1
        return self.state

    def forward(self) -> NavigationState:
        """Move one entry forward (a no-op at the newest entry)."""
        if self._position < len(self._entries) - 1:
            self._position += 1
        return self.state

    def settle(self, *, max_passes: int = MAX_RECONCILE_PASSES) -> Settlement:
        """Reconcile the current entry, pushing each correction into history.

        Every pass re-derives the state from the URL it just pushed.

        Raises:
            EmptyDatasetError: If the store loaded zero records.
            UnresolvableStateError: If no valid state is reached in ``max_passes``.
        """
        corrections: list[Correct] = []
        for _ in range(max_passes):
            decision = reconcile(self.state, self.store)
            if isinstance(decision, Pending):
                return Settlement(state=None, corrections=corrections)
            if isinstance(decision, Valid):
                if corrections:
                    logger.info(
                        "Navigation redirected",
                        extra={"corrections": [item.correction.value for item in corrections], "url": self.url},
                    )
                return Settlement(state=decision.state, corrections=corrections)
            corrections.append(decision)
            self.push(decision.state)

        raise UnresolvableStateError(f"navigation did not settle after {max_passes} passes at {self.url}")

    def link_for(self, record: FaqRecord) -> str:
        return link_for_record(record, self.path)

    def url_for(self, state: NavigationState) -> str:
        return build_url(state, self.path)
