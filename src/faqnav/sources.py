"""Raw dataset sources: local JSON files and HTTP(S) URLs.

Both readers return the undecoded payload so that ``parse_records`` reports
bad encodings the same way as bad JSON.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Final

import httpx

from faqnav.config import (
    FAQNAV_FETCH_BACKOFF_S,
    FAQNAV_FETCH_MAX_RETRIES,
    FAQNAV_FETCH_TIMEOUT_S,
    FAQNAV_USER_AGENT,
)
from faqnav.exceptions import DatasetNotFoundError, DatasetReadError, FetchError

logger = logging.getLogger(__name__)

URL_SCHEMES: Final[tuple[str, ...]] = ("http://", "https://")
RETRY_STATUS_CODES: Final[frozenset[int]] = frozenset({429, 500, 502, 503, 504})

_MAX_REDIRECTS: Final[int] = 5


def is_url(source: str | Path) -> bool:
    return str(source).startswith(URL_SCHEMES)


async def read_dataset_file(path: str | Path) -> bytes:
    """Read a dataset file in a worker thread.

    Raises:
        DatasetNotFoundError: If ``path`` is not a file.
        DatasetReadError: If the file cannot be read.
    """
    path = Path(path).expanduser()
    if not path.is_file():
        raise DatasetNotFoundError(f"FAQ dataset file not found: {path}")
    try:
        return await asyncio.to_thread(path.read_bytes)
    except OSError as exc:
        raise DatasetReadError(f"Cannot read FAQ dataset {path}: {exc}") from exc


async def fetch_dataset(url: str, *, client: httpx.AsyncClient | None = None) -> bytes:
    """Download a dataset, retrying throttling, gateway errors and network failures.

    Other 4xx/5xx answers fail at once; a 404 means the dataset does not exist.

    Args:
        url: ``http(s)://`` URL of the record list.
        client: Client to reuse. A short-lived one is opened when omitted.

    Raises:
        DatasetNotFoundError: On 404.
        FetchError: On a non-retryable status or when every attempt failed.
    """
    attempts = FAQNAV_FETCH_MAX_RETRIES + 1
    failure = "no attempt made"

    async with _dataset_client(client) as http_client:
        for attempt in range(1, attempts + 1):
            try:
                response = await http_client.get(url)
            except httpx.RequestError as exc:
                failure = f"{type(exc).__name__}: {exc}"
            else:
                status = response.status_code
                if status == 404:
                    raise DatasetNotFoundError(f"FAQ dataset not found at {url}")
                if status < 400:
                    logger.debug("FAQ dataset downloaded", extra={"url": url, "attempt": attempt})
                    return response.content
                if status not in RETRY_STATUS_CODES:
                    raise FetchError(f"FAQ dataset request to {url} failed with HTTP {status}")
                failure = f"HTTP {status}"

            if attempt < attempts:
                delay = FAQNAV_FETCH_BACKOFF_S * 2 ** (attempt - 1)
                logger.warning(
                    "FAQ dataset download failed, retrying",
                    extra={"url": url, "attempt": attempt, "failure": failure, "delay_s": delay},
                )
                await asyncio.sleep(delay)

    raise FetchError(f"Failed to fetch FAQ dataset from {url} after {attempts} attempts: {failure}")


@asynccontextmanager
async def _dataset_client(client: httpx.AsyncClient | None) -> AsyncIterator[httpx.AsyncClient]:
    if client is not None:
        yield client
        return
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(FAQNAV_FETCH_TIMEOUT_S),
        headers={"User-Agent": FAQNAV_USER_AGENT},
        follow_redirects=True,
        max_redirects=_MAX_REDIRECTS,
    ) as owned:
        yield owned
