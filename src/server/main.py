"""FastAPI application for faqnav."""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from faqnav.config import FAQNAV_DATA_SOURCE
from faqnav.exceptions import FaqNavError
from faqnav.store import RecordStore, load_records
from faqnav.utils.logging_config import get_logger
from server.routers import faq
from server.server_config import APP_TITLE

logger = get_logger(__name__)


async def _load_store(app: FastAPI, source: str) -> None:
    """Load the session records once; failures are kept for the routes to report."""
    try:
        records = await load_records(source)
        app.state.store.load(records)
    except FaqNavError as exc:
        app.state.load_error = exc
        logger.error("Failed to load FAQ dataset", extra={"source": source, "error": str(exc)})
    except Exception as exc:
        # An uncollected task failure would leave the routes answering 503.
        app.state.load_error = exc
        logger.exception("Unexpected error loading FAQ dataset", extra={"source": source})


def create_app(*, source: str = FAQNAV_DATA_SOURCE, store: RecordStore | None = None) -> FastAPI:
    """Create the application.

    Args:
        source: Dataset path or URL, loaded in the background at startup.
        store: Pre-loaded store. When given, nothing is loaded.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        task: asyncio.Task[None] | None = None
        if not app.state.store.is_loaded:
            task = asyncio.create_task(_load_store(app, source))
        try:
            yield
        finally:
            if task is not None and not task.done():
                task.cancel()

    app = FastAPI(title=APP_TITLE, lifespan=lifespan)
    app.state.store = store if store is not None else RecordStore()
    app.state.load_error = None
    app.include_router(faq.router)
    return app


app = create_app()
