"""Server configuration constants."""

from __future__ import annotations

import os

APP_TITLE = "faqnav"
MAX_SEARCH_RESULTS = int(os.getenv("FAQNAV_MAX_SEARCH_RESULTS", "20"))
RETRY_AFTER_SECONDS = 1
