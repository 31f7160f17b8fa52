"""FAQ navigation and search endpoints."""

from fastapi import APIRouter, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse, Response

from faqnav.codec import decode, link_for_record
from faqnav.config import FAQNAV_BASE_PATH
from faqnav.schemas import PageView
from faqnav.search import search_records
from faqnav.store import RecordStore
from server.models import ErrorResponse, RecordLinkResponse, SearchResponse, SearchResult
from server.query_processor import NotReady, RedirectTarget, process_navigation
from server.server_config import MAX_SEARCH_RESULTS, RETRY_AFTER_SECONDS

router = APIRouter()


def _get_store(request: Request) -> RecordStore:
    """Return the loaded store, or raise the HTTP error matching its load state."""
    load_error = request.app.state.load_error
    if load_error is not None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"FAQ dataset unavailable: {load_error}",
        )
    store: RecordStore = request.app.state.store
    if not store.is_loaded:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="FAQ dataset is still loading",
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )
    return store


@router.get(FAQNAV_BASE_PATH, response_model=PageView, responses={500: {"model": ErrorResponse}})
async def faq_page(
    request: Request,
    category: str = "",
    section: str = "",
    subject: str = "",
    question: str = "",
) -> Response:
    """Render one navigation state.

    **Query Parameters**
    - **category**, **section**, **subject**, **question** (`str`, optional):
      the navigation state. Missing or empty values are filled in.

    **Returns**
    - **JSONResponse**: the page view when the state is valid
    - **RedirectResponse**: **302** to the corrected state otherwise
    """
    store = _get_store(request)
    state = decode({"category": category, "section": section, "subject": subject, "question": question})
    outcome = process_navigation(state, store, path=request.url.path)

    if isinstance(outcome, NotReady):
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="FAQ dataset is still loading",
            headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
        )
    if isinstance(outcome, RedirectTarget):
        return RedirectResponse(url=outcome.location, status_code=status.HTTP_302_FOUND)
    if isinstance(outcome, ErrorResponse):
        return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=outcome.model_dump())
    return JSONResponse(content=outcome.model_dump(mode="json"))


@router.get("/api/search", response_model=SearchResponse)
async def search(request: Request, q: str = "") -> SearchResponse:
    """Search questions by case-insensitive substring.

    **Query Parameters**
    - **q** (`str`): search text; leading whitespace is ignored
    """
    store = _get_store(request)
    matches = search_records(store.records, q)
    results = [
        SearchResult(
            id=record.id,
            category=record.category,
            section=record.section,
            subject=record.subject,
            question=record.question,
            url=link_for_record(record, FAQNAV_BASE_PATH),
        )
        for record in matches[:MAX_SEARCH_RESULTS]
    ]
    return SearchResponse(query=q, results=results, truncated=len(matches) > MAX_SEARCH_RESULTS)


@router.get("/api/records/{record_id}/link", response_model=RecordLinkResponse)
async def record_link(request: Request, record_id: int) -> RecordLinkResponse:
    """Shareable link selecting one record.

    **Raises**
    - **HTTPException**: **404** - no record has this id
    """
    store = _get_store(request)
    record = store.index.get(record_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Record {record_id} not found")
    return RecordLinkResponse(id=record.id, url=link_for_record(record, FAQNAV_BASE_PATH))
