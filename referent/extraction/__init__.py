"""Article page fetching and best-effort field extraction."""

from referent.extraction.exceptions import (
    PageFetchError,
    PageStatusError,
    PageTimeoutError,
    PageUnavailableError,
)
from referent.extraction.extractor import extract
from referent.extraction.fetcher import fetch_page, validate_url
from referent.extraction.models import NOT_FOUND, ParsedArticle

__all__ = [
    "NOT_FOUND",
    "PageFetchError",
    "PageStatusError",
    "PageTimeoutError",
    "PageUnavailableError",
    "ParsedArticle",
    "extract",
    "fetch_page",
    "validate_url",
]
