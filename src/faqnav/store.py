"""Session record store and dataset loader."""

from __future__ import annotations

import logging
from functools import cached_property
from pathlib import Path
from typing import Iterable

import httpx
from pydantic import TypeAdapter, ValidationError

from faqnav.exceptions import DuplicateRecordError, RecordParseError
from faqnav.lookup import LookupIndex
from faqnav.schemas import FaqRecord
from faqnav.sources import fetch_dataset, is_url, read_dataset_file

logger = logging.getLogger(__name__)

_RECORD_LIST = TypeAdapter(list[FaqRecord])


class RecordStore:
    """Holds the immutable record list for one session.

    A store starts unloaded and receives its records exactly once. Records
    keep their load order, which is the only tie-break used by lookups.
    """

    def __init__(self, records: Iterable[FaqRecord] | None = None) -> None:
        self._records: tuple[FaqRecord, ...] | None = None
        if records is not None:
            self.load(records)

    @property
    def is_loaded(self) -> bool:
        return self._records is not None

    @property
    def records(self) -> tuple[FaqRecord, ...]:
        if self._records is None:
            raise RuntimeError("record store has not been loaded yet")
        return self._records

    def load(self, records: Iterable[FaqRecord]) -> None:
        """Install the session records.

        Raises:
            RuntimeError: If the store was already loaded.
            DuplicateRecordError: If two records share an id or a full key.
        """
        if self._records is not None:
            raise RuntimeError("record store is already loaded")
        loaded = tuple(records)
        _check_unique(loaded)
        self._records = loaded
        logger.debug("Loaded %d FAQ records", len(loaded))

    @cached_property
    def index(self) -> LookupIndex:
        return LookupIndex(self.records)

    def __len__(self) -> int:
        return len(self.records)


def _check_unique(records: tuple[FaqRecord, ...]) -> None:
    seen_ids: set[int] = set()
    seen_keys: set[tuple[str, str, str | None, str]] = set()
    for record in records:
        if record.id in seen_ids:
            raise DuplicateRecordError(f"Duplicate record id {record.id}")
        if record.key in seen_keys:
            raise DuplicateRecordError(
                f"Duplicate question {record.question!r} in "
                f"{record.category!r} / {record.section!r} / {record.subject!r}"
            )
        seen_ids.add(record.id)
        seen_keys.add(record.key)


async def load_records(
    source: str | Path,
    *,
    client: httpx.AsyncClient | None = None,
) -> list[FaqRecord]:
    """Load FAQ records from a local JSON file or an HTTP(S) URL.

    Args:
        source: File path or ``http(s)://`` URL of a JSON array of records.
        client: Optional httpx.AsyncClient used for URL sources.

    Returns:
        The records in document order. An empty list is returned as is.

    Raises:
        DatasetNotFoundError: If the file or URL does not exist.
        DatasetReadError: If the file exists but cannot be read.
        RecordParseError: If the payload is not a valid UTF-8 record list.
        FetchError: If a network error persists after retries.
    """
    source_text = str(source)
    if is_url(source_text):
        payload = await fetch_dataset(source_text, client=client)
    else:
        payload = await read_dataset_file(source)

    records = parse_records(payload)
    logger.info("FAQ dataset loaded", extra={"source": source_text, "records": len(records)})
    return records


def parse_records(payload: str | bytes) -> list[FaqRecord]:
    """Validate a JSON payload into FAQ records.

    Raises:
        RecordParseError: If the payload is not JSON or a record is malformed.
    """
    try:
        return _RECORD_LIST.validate_json(payload)
    except ValidationError as exc:
        raise RecordParseError(f"Invalid FAQ dataset: {exc}") from exc
