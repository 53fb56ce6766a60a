"""Fetching raw article pages over HTTP."""

import logging
from urllib.parse import urlparse

import requests
from bs4.dammit import EncodingDetector, UnicodeDammit

from referent.extraction.constants import ALLOWED_SCHEMES, DEFAULT_HEADERS, DEFAULT_TIMEOUT
from referent.extraction.exceptions import (
    PageStatusError,
    PageTimeoutError,
    PageUnavailableError,
)
from referent.utils.deadline import DeadlineOutcome, call_with_deadline

logger = logging.getLogger(__name__)


def validate_url(url: str) -> str:
    """Check that a URL is an absolute http(s) address.

    :param url: The URL submitted by the user.
    :returns: The stripped URL.
    :raises ValueError: If the URL is not absolute http or https.
    """
    cleaned = url.strip()
    parsed = urlparse(cleaned)
    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not parsed.netloc:
        raise ValueError("Некорректный URL: ожидается адрес http:// или https://")
    return cleaned


def decode_page(response: requests.Response) -> str:
    """Decode a page body, honouring the charset the page itself declares.

    Without a charset in Content-Type, requests falls back to ISO-8859-1.
    Instead, the encoding comes from a <meta> declaration, then UTF-8, then
    detection by BeautifulSoup.

    :param response: A fully read response.
    :returns: The page HTML as text.
    """
    if "charset=" in response.headers.get("Content-Type", "").lower():
        return response.text

    declared = EncodingDetector.find_declared_encoding(response.content, is_html=True)
    dammit = UnicodeDammit(
        response.content,
        known_definite_encodings=[declared] if declared else [],
        user_encodings=["utf-8"],
        is_html=True,
    )
    return dammit.unicode_markup or ""


def fetch_page(url: str, *, timeout: float = DEFAULT_TIMEOUT) -> str:
    """Download an article page with a browser-like identity.

    :param url: The article URL.
    :param timeout: Deadline in seconds; the fetch is abandoned after it.
    :returns: The page HTML.
    :raises ValueError: If the URL is not http or https.
    :raises PageTimeoutError: If the deadline expires.
    :raises PageUnavailableError: If the site cannot be reached.
    :raises PageStatusError: If the site answers with a non-2xx status.
    """
    target = validate_url(url)
    logger.info(f"Fetching article page: {target}")

    result = call_with_deadline(
        lambda deadline: requests.get(
            target, headers=DEFAULT_HEADERS, timeout=deadline, stream=True
        ),
        timeout,
        description=f"GET {target}",
    )

    if result.outcome == DeadlineOutcome.TIMED_OUT:
        raise PageTimeoutError(timeout)
    if not result.ok or result.value is None:
        raise PageUnavailableError()

    response = result.value
    if not response.ok:
        logger.warning(f"Article page returned {response.status_code}: {target}")
        raise PageStatusError(response.status_code)

    html = decode_page(response)
    logger.debug(f"Fetched {len(html)} chars from {target}")
    return html
