"""faqnav: URL-driven navigation over a flat FAQ knowledge base."""

from faqnav.aggregation import build_faq_tree, count_leaves, list_categories
from faqnav.codec import build_url, decode, encode, encode_query, link_for_record
from faqnav.exceptions import (
    DatasetError,
    DatasetNotFoundError,
    DatasetReadError,
    DuplicateRecordError,
    EmptyDatasetError,
    FaqNavError,
    FetchError,
    RecordParseError,
    StructuralInconsistencyError,
    UnresolvableStateError,
)
from faqnav.lookup import LookupIndex
from faqnav.navigator import Navigator
from faqnav.reconciliation import (
    MAX_RECONCILE_PASSES,
    Correct,
    Correction,
    Pending,
    Settlement,
    Valid,
    reconcile,
    settle,
)
from faqnav.schemas import FaqRecord, FaqTree, NavigationState, PageView, SubjectSelection
from faqnav.search import search_records
from faqnav.store import RecordStore, load_records
from faqnav.view import build_page_view

__all__ = [
    "MAX_RECONCILE_PASSES",
    "Correct",
    "Correction",
    "DatasetError",
    "DatasetNotFoundError",
    "DatasetReadError",
    "DuplicateRecordError",
    "EmptyDatasetError",
    "FaqNavError",
    "FaqRecord",
    "FaqTree",
    "FetchError",
    "LookupIndex",
    "NavigationState",
    "Navigator",
    "PageView",
    "Pending",
    "RecordParseError",
    "RecordStore",
    "Settlement",
    "StructuralInconsistencyError",
    "SubjectSelection",
    "UnresolvableStateError",
    "Valid",
    "build_faq_tree",
    "build_page_view",
    "build_url",
    "count_leaves",
    "decode",
    "encode",
    "encode_query",
    "link_for_record",
    "list_categories",
    "load_records",
    "reconcile",
    "search_records",
    "settle",
]
