"""HTTP client for the Referent API."""

import logging
import os
from enum import StrEnum
from typing import Any

import requests

from referent.utils.deadline import DeadlineOutcome, call_with_deadline

logger = logging.getLogger(__name__)

# Default timeout for API requests in seconds
DEFAULT_TIMEOUT = 30

# HTTP status code threshold for errors
HTTP_ERROR_THRESHOLD = 400

TIMEOUT_MESSAGE = "Превышено время ожидания ответа сервера"
TRANSPORT_MESSAGE = "Не удалось связаться с сервером"
MALFORMED_MESSAGE = "Неожиданный формат ответа сервера"


class FailureKind(StrEnum):
    """Failure classes reported by the API client."""

    TIMEOUT = "timeout"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"
    MALFORMED = "malformed"


class ReferentAPIClientError(Exception):
    """Raised when an API request fails."""

    def __init__(
        self,
        message: str,
        *,
        kind: FailureKind,
        status_code: int | None = None,
    ) -> None:
        """Initialise the error.

        :param message: User-facing error message.
        :param kind: Failure class.
        :param status_code: HTTP status code if available.
        """
        super().__init__(message)
        self.kind = kind
        self.status_code = status_code


class ReferentAPIClient:
    """HTTP client for the parse, translate and analyse endpoints.

    Every request is bounded by one deadline and never retried.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the API client.

        :param base_url: Base URL for API. Defaults to REFERENT_API_BASE_URL env var.
        :param timeout: Request timeout in seconds.
        """
        self.base_url = (
            base_url or os.environ.get("REFERENT_API_BASE_URL", "http://localhost:8000")
        ).rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

        logger.debug(f"ReferentAPIClient initialised: base_url={self.base_url}")

    def parse(self, url: str) -> dict[str, str]:
        """Fetch and extract an article.

        :param url: Article URL.
        :returns: Dict with date, title and content.
        :raises ReferentAPIClientError: If the request fails.
        """
        data = self._post("/parse", {"url": url})
        if not all(isinstance(data.get(key), str) for key in ("date", "title", "content")):
            raise self._malformed("/parse")
        return {key: data[key] for key in ("date", "title", "content")}

    def translate(self, text: str) -> str:
        """Translate text to Russian.

        :param text: Text to translate.
        :returns: The translation.
        :raises ReferentAPIClientError: If the request fails.
        """
        data = self._post("/translate", {"text": text})
        return self._expect_field(data, "translation", "/translate")

    def analyze(self, text: str, action: str, source_url: str | None = None) -> str:
        """Derive an artifact from article text.

        :param text: Article text, already translated for Telegram posts.
        :param action: summary, theses or telegram.
        :param source_url: Article URL for the Telegram trailer.
        :returns: The generated artifact.
        :raises ReferentAPIClientError: If the request fails.
        """
        body: dict[str, Any] = {"text": text, "action": action}
        if source_url:
            body["sourceUrl"] = source_url
        return self._expect_field(self._post("/analyze", body), "result", "/analyze")

    def _expect_field(self, data: dict[str, Any], field: str, path: str) -> str:
        value = data.get(field)
        if not isinstance(value, str):
            raise self._malformed(path)
        return value

    @staticmethod
    def _malformed(path: str) -> ReferentAPIClientError:
        logger.warning(f"API response missing expected field: POST {path}")
        return ReferentAPIClientError(MALFORMED_MESSAGE, kind=FailureKind.MALFORMED)

    def _post(self, path: str, json: dict[str, Any]) -> dict[str, Any]:
        """Make a POST request to the API.

        :param path: API endpoint path.
        :param json: JSON request body.
        :returns: JSON response data.
        :raises ReferentAPIClientError: If the request fails.
        """
        url = f"{self.base_url}{path}"
        logger.debug(f"API request: POST {path}")

        result = call_with_deadline(
            lambda deadline: self._session.post(url, json=json, timeout=deadline, stream=True),
            self.timeout,
            description=f"POST {path}",
        )

        if result.outcome == DeadlineOutcome.TIMED_OUT:
            raise ReferentAPIClientError(TIMEOUT_MESSAGE, kind=FailureKind.TIMEOUT)
        if not result.ok or result.value is None:
            raise ReferentAPIClientError(TRANSPORT_MESSAGE, kind=FailureKind.TRANSPORT)

        response = result.value
        if response.status_code >= HTTP_ERROR_THRESHOLD:
            error_detail = self._extract_error_detail(response)
            logger.warning(
                f"API request failed: POST {path} -> {response.status_code}: {error_detail}"
            )
            kind = (
                FailureKind.TIMEOUT
                if response.status_code == requests.codes.gateway_timeout
                else FailureKind.UPSTREAM
            )
            raise ReferentAPIClientError(error_detail, kind=kind, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise self._malformed(path) from e
        if not isinstance(data, dict):
            raise self._malformed(path)
        return data

    @staticmethod
    def _extract_error_detail(response: requests.Response) -> str:
        """Extract error detail from response.

        :param response: HTTP response.
        :returns: Error message string.
        """
        try:
            data = response.json()
            if isinstance(data, dict) and data.get("error"):
                return str(data["error"])
            return f"HTTP {response.status_code}"
        except ValueError:
            return f"HTTP {response.status_code}"

    def close(self) -> None:
        """Close the HTTP session."""
        self._session.close()

    def __enter__(self) -> "ReferentAPIClient":
        """Enter context manager."""
        return self

    def __exit__(self, *args: object) -> None:
        """Exit context manager."""
        self.close()
