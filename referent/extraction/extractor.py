"""Best-effort extraction of title, date and body from article HTML."""

import logging

from bs4 import BeautifulSoup

from referent.extraction.models import NOT_FOUND, ParsedArticle
from referent.extraction.probes import (
    CONTENT_PROBES,
    DATE_PROBES,
    TITLE_PROBES,
    first_match,
    normalise_whitespace,
)

logger = logging.getLogger(__name__)


def extract(html: str) -> ParsedArticle:
    """Extract the article title, publication date and body text.

    This is a heuristic: pages with unconventional markup give degraded
    results. It never raises; any field no probe recovers is the
    ``NOT_FOUND`` sentinel.

    :param html: Raw page HTML.
    :returns: The parsed article.
    """
    try:
        soup = BeautifulSoup(html or "", "lxml")

        title = first_match(soup, TITLE_PROBES)
        date = first_match(soup, DATE_PROBES)
        content = first_match(soup, CONTENT_PROBES)
    except Exception:
        logger.exception("Article extraction failed, returning placeholders")
        return ParsedArticle()

    article = ParsedArticle(
        title=title or NOT_FOUND,
        date=date or NOT_FOUND,
        content=normalise_whitespace(content) if content else NOT_FOUND,
    )
    logger.info(
        f"Extracted article: title_found={article.title != NOT_FOUND}, "
        f"date_found={article.date != NOT_FOUND}, content_found={article.has_content}"
    )
    return article
