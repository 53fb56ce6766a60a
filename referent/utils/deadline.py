"""Bounded outbound calls with a tagged result."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum
from typing import Generic, TypeVar

import requests
from urllib3.exceptions import ReadTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Deadline for every outbound call, in seconds
DEFAULT_DEADLINE_SECONDS = 30.0

# Bytes read per chunk when streaming a response body
BODY_CHUNK_SIZE = 8192


class DeadlineOutcome(StrEnum):
    """How a bounded call finished."""

    OK = "ok"
    TIMED_OUT = "timed_out"
    TRANSPORT_ERROR = "transport_error"


@dataclass(frozen=True)
class DeadlineResult(Generic[T]):
    """Result of a call made through call_with_deadline.

    Exactly one of ``value`` (for OK) or ``error`` (for TRANSPORT_ERROR) is
    meaningful; TIMED_OUT carries neither.
    """

    outcome: DeadlineOutcome
    value: T | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        """Whether the call completed within its deadline."""
        return self.outcome == DeadlineOutcome.OK

    @classmethod
    def success(cls, value: T) -> DeadlineResult[T]:
        """Build an OK result."""
        return cls(outcome=DeadlineOutcome.OK, value=value)

    @classmethod
    def timed_out(cls) -> DeadlineResult[T]:
        """Build a TIMED_OUT result."""
        return cls(outcome=DeadlineOutcome.TIMED_OUT)

    @classmethod
    def transport_error(cls, error: Exception) -> DeadlineResult[T]:
        """Build a TRANSPORT_ERROR result."""
        return cls(outcome=DeadlineOutcome.TRANSPORT_ERROR, error=error)


def _read_body(response: requests.Response, deadline_at: float, description: str) -> None:
    """Read a streamed body in chunks, giving up once the deadline passes.

    The per-socket read timeout bounds each chunk; this bounds the total.

    :param response: Response opened with ``stream=True``.
    :param deadline_at: ``time.monotonic()`` value after which reading stops.
    :param description: Human-readable name of the call, for the error.
    :raises requests.exceptions.Timeout: If the body is not complete in time.
    """
    chunks: list[bytes] = []
    try:
        for chunk in response.iter_content(chunk_size=BODY_CHUNK_SIZE):
            if time.monotonic() > deadline_at:
                raise requests.exceptions.Timeout(f"{description}: body not received in time")
            chunks.append(chunk)
    except requests.exceptions.Timeout:
        response.close()
        raise
    except requests.exceptions.ConnectionError as e:
        # requests reports a read timeout mid-body as a connection error
        if e.args and isinstance(e.args[0], ReadTimeoutError):
            response.close()
            raise requests.exceptions.Timeout(f"{description}: body read timed out") from e
        raise
    response._content = b"".join(chunks)


def call_with_deadline(
    func: Callable[[float], T],
    timeout: float = DEFAULT_DEADLINE_SECONDS,
    *,
    description: str = "outbound call",
) -> DeadlineResult[T]:
    """Run a blocking network call bounded by a total deadline.

    The callable receives the deadline in seconds and must pass it on to the
    underlying ``requests`` call, opened with ``stream=True``. When it returns
    a response, the body is read here against the same deadline, so a server
    trickling bytes cannot hold the call open. No retry is attempted.

    :param func: Callable performing the request, called as ``func(timeout)``.
    :param timeout: Deadline in seconds for the whole call, body included.
    :param description: Human-readable name of the call, for logging.
    :returns: A tagged result: OK with the value, TIMED_OUT, or TRANSPORT_ERROR.
    """
    deadline_at = time.monotonic() + timeout
    try:
        value = func(timeout)
        if isinstance(value, requests.Response):
            _read_body(value, deadline_at, description)
        return DeadlineResult.success(value)
    except requests.exceptions.Timeout:
        logger.warning(f"{description} timed out after {timeout}s")
        return DeadlineResult.timed_out()
    except requests.exceptions.RequestException as e:
        logger.warning(f"{description} failed: {type(e).__name__}: {e}")
        return DeadlineResult.transport_error(e)
