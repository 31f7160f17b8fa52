"""Local configuration for faqnav."""

from __future__ import annotations

import os

DEFAULT_DATA_SOURCE = "data/faq.json"
DEFAULT_BASE_PATH = "/faq"
DEFAULT_FETCH_TIMEOUT_S = 10.0
DEFAULT_FETCH_MAX_RETRIES = 2
DEFAULT_FETCH_BACKOFF_S = 0.5
DEFAULT_USER_AGENT = "faqnav/0.1"
DEFAULT_LOG_LEVEL = "INFO"

# Local path or http(s) URL of the JSON record list.
FAQNAV_DATA_SOURCE = os.getenv("FAQNAV_DATA_SOURCE", DEFAULT_DATA_SOURCE)
FAQNAV_BASE_PATH = os.getenv("FAQNAV_BASE_PATH", DEFAULT_BASE_PATH)
FAQNAV_FETCH_TIMEOUT_S = float(os.getenv("FAQNAV_FETCH_TIMEOUT_S", str(DEFAULT_FETCH_TIMEOUT_S)))
FAQNAV_FETCH_MAX_RETRIES = int(os.getenv("FAQNAV_FETCH_MAX_RETRIES", str(DEFAULT_FETCH_MAX_RETRIES)))
FAQNAV_FETCH_BACKOFF_S = float(os.getenv("FAQNAV_FETCH_BACKOFF_S", str(DEFAULT_FETCH_BACKOFF_S)))
FAQNAV_USER_AGENT = os.getenv("FAQNAV_USER_AGENT", DEFAULT_USER_AGENT)
FAQNAV_LOG_LEVEL = os.getenv("FAQNAV_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
