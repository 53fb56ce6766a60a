"""Selector probes for recovering article fields from arbitrary markup.

Each probe is a pure function taking a parsed document and returning the
field text, or None if it found nothing. Probes are tried in order and the
first non-empty result wins.
"""

import copy
import logging
import re
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag

logger = logging.getLogger(__name__)

Probe = Callable[[BeautifulSoup], str | None]

# Containers must yield more than this many characters to count as the body
MIN_CONTENT_LENGTH = 100

# Subtrees that never hold article text
NOISE_SELECTOR = "script, style, nav, header, footer, aside, .ad, .advertisement"

WHITESPACE_PATTERN = re.compile(r"\s+")


def normalise_whitespace(text: str) -> str:
    """Collapse every run of whitespace to a single space.

    :param text: Raw text.
    :returns: The normalised, stripped text.
    """
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def _first(soup: BeautifulSoup, selector: str) -> Tag | None:
    return soup.select_one(selector)


def _text_probe(selector: str) -> Probe:
    """Build a probe returning the stripped text of the first match."""

    def probe(soup: BeautifulSoup) -> str | None:
        element = _first(soup, selector)
        if element is None:
            return None
        return normalise_whitespace(element.get_text()) or None

    probe.__name__ = f"text_probe({selector})"
    return probe


def _datetime_probe(selector: str) -> Probe:
    """Build a probe preferring the ``datetime`` attribute over visible text."""

    def probe(soup: BeautifulSoup) -> str | None:
        element = _first(soup, selector)
        if element is None:
            return None
        machine_readable = element.get("datetime")
        if isinstance(machine_readable, str) and machine_readable.strip():
            return machine_readable.strip()
        return normalise_whitespace(element.get_text()) or None

    probe.__name__ = f"datetime_probe({selector})"
    return probe


def _meta_probe(selector: str) -> Probe:
    """Build a probe returning the ``content`` attribute of a meta tag."""

    def probe(soup: BeautifulSoup) -> str | None:
        element = _first(soup, selector)
        if element is None:
            return None
        value = element.get("content")
        if isinstance(value, str) and value.strip():
            return value.strip()
        return None

    probe.__name__ = f"meta_probe({selector})"
    return probe


def strip_noise(element: Tag) -> Tag:
    """Remove scripts, navigation and ad blocks from a subtree in place.

    :param element: The container to clean.
    :returns: The same element, for chaining.
    """
    for noise in element.select(NOISE_SELECTOR):
        noise.decompose()
    return element


def _container_probe(selector: str, min_length: int = MIN_CONTENT_LENGTH) -> Probe:
    """Build a probe returning a container's text if it is long enough.

    The container is copied before noise removal so probes stay pure.
    """

    def probe(soup: BeautifulSoup) -> str | None:
        element = _first(soup, selector)
        if element is None:
            return None
        text = normalise_whitespace(strip_noise(copy.copy(element)).get_text(" "))
        if len(text) > min_length:
            return text
        return None

    probe.__name__ = f"container_probe({selector})"
    return probe


def body_fallback(soup: BeautifulSoup) -> str | None:
    """Return the text of the whole body, noise removed, whatever its length.

    :param soup: The parsed document.
    :returns: The body text or None if the page has no text at all.
    """
    root = soup.body if soup.body is not None else soup
    text = normalise_whitespace(strip_noise(copy.copy(root)).get_text(" "))
    return text or None


TITLE_PROBES: tuple[Probe, ...] = (
    _text_probe("h1"),
    _text_probe("article h1"),
    _text_probe(".post-title"),
    _text_probe(".article-title"),
    _text_probe('[class*="title"]'),
    _text_probe("title"),
)

DATE_PROBES: tuple[Probe, ...] = (
    _datetime_probe("time[datetime]"),
    _datetime_probe("time"),
    _datetime_probe('[class*="date"]'),
    _datetime_probe('[class*="published"]'),
    _datetime_probe('[class*="time"]'),
    _meta_probe('meta[property="article:published_time"]'),
    _meta_probe('meta[name="publish-date"]'),
)

CONTENT_PROBES: tuple[Probe, ...] = (
    _container_probe("article"),
    _container_probe(".post"),
    _container_probe(".content"),
    _container_probe(".article-content"),
    _container_probe('[class*="article"]'),
    _container_probe('[class*="post-content"]'),
    _container_probe('[class*="entry-content"]'),
    _container_probe("main"),
    body_fallback,
)


def first_match(soup: BeautifulSoup, probes: tuple[Probe, ...]) -> str | None:
    """Run probes in order and return the first non-empty result.

    :param soup: The parsed document.
    :param probes: Ordered probes to try.
    :returns: The first non-empty value, or None if every probe missed.
    """
    for probe in probes:
        value = probe(soup)
        if value:
            logger.debug(f"Matched {probe.__name__}")
            return value
    return None
