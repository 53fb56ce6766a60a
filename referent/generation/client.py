"""OpenRouter chat completions client for translation and artifacts."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

import requests

from referent.config import DEFAULT_APP_URL, DEFAULT_MODEL
from referent.generation.exceptions import (
    GenerationTimeoutError,
    GenerationTransportError,
    MalformedResponseError,
    MissingCredentialError,
    UpstreamStatusError,
)
from referent.generation.models import PromptSpec
from referent.utils.deadline import DeadlineOutcome, call_with_deadline

logger = logging.getLogger(__name__)

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
APP_TITLE = "Referent"

# Default timeout for generation requests in seconds
DEFAULT_TIMEOUT = 30

KEYS_URL = "https://openrouter.ai/settings/keys"


def _upstream_message(details: dict[str, Any]) -> str | None:
    """Pull the upstream error text out of an OpenRouter error body."""
    error = details.get("error")
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    if details.get("message"):
        return str(details["message"])
    return None


def classify_upstream_error(status_code: int, details: dict[str, Any]) -> str:
    """Turn an OpenRouter error status into a human-readable message.

    :param status_code: HTTP status returned by OpenRouter.
    :param details: Parsed error body, possibly empty.
    :returns: The message shown to the user.
    """
    upstream = _upstream_message(details)

    if status_code == HTTPStatus.UNAUTHORIZED:
        return (
            f"Неверный или недействительный API ключ. Проверьте ключ на {KEYS_URL} "
            "и убедитесь, что он активен."
        )
    if status_code == HTTPStatus.PAYMENT_REQUIRED or (
        status_code == HTTPStatus.FORBIDDEN and upstream and "limit" in upstream.lower()
    ):
        return f"Превышен лимит использования API ключа. Проверьте баланс и лимиты на {KEYS_URL}"
    if status_code == HTTPStatus.TOO_MANY_REQUESTS:
        return "Слишком много запросов к API OpenRouter. Повторите попытку позже."
    if status_code >= HTTPStatus.INTERNAL_SERVER_ERROR:
        return f"Сервис OpenRouter временно недоступен ({status_code}). Повторите попытку позже."

    message = f"Ошибка API OpenRouter: {status_code}"
    if upstream:
        message += f" - {upstream}"
    return message


class GenerationClient:
    """Client for the OpenRouter chat completions API.

    Sends one system/user prompt pair per call and returns the generated text.
    Every call is bounded by a single deadline and never retried.
    """

    def __init__(
        self,
        *,
        api_key: str | None,
        app_url: str = DEFAULT_APP_URL,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialise the generation client.

        :param api_key: OpenRouter API key.
        :param app_url: Public base URL sent as the HTTP referer.
        :param model: OpenRouter model identifier.
        :param timeout: Request deadline in seconds.
        :raises MissingCredentialError: If no API key is given.
        """
        if not api_key or not api_key.strip():
            raise MissingCredentialError()

        self._api_key = api_key.strip()
        self.app_url = app_url
        self.model = model
        self.timeout = timeout

        logger.debug(f"GenerationClient initialised: model={model}, timeout={timeout}s")

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.app_url,
            "X-Title": APP_TITLE,
        }

    def complete(self, prompt: PromptSpec) -> str:
        """Generate text for a prompt.

        :param prompt: System/user prompt pair and temperature.
        :returns: The generated text.
        :raises GenerationTimeoutError: If the deadline expires.
        :raises GenerationTransportError: If OpenRouter cannot be reached.
        :raises UpstreamStatusError: If OpenRouter answers with a non-2xx status.
        :raises MalformedResponseError: If the response has no generated text.
        """
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": prompt.system_prompt},
                {"role": "user", "content": prompt.user_prompt},
            ],
            "temperature": prompt.temperature,
        }

        logger.info(
            f"Calling OpenRouter: model={self.model}, temperature={prompt.temperature}, "
            f"prompt_chars={len(prompt.user_prompt)}"
        )

        result = call_with_deadline(
            lambda deadline: requests.post(
                OPENROUTER_URL,
                headers=self._headers(),
                json=payload,
                timeout=deadline,
                stream=True,
            ),
            self.timeout,
            description="OpenRouter completion",
        )

        if result.outcome == DeadlineOutcome.TIMED_OUT:
            raise GenerationTimeoutError(self.timeout)
        if not result.ok or result.value is None:
            raise GenerationTransportError()

        response = result.value
        if not response.ok:
            details = self._error_details(response)
            logger.error(
                f"OpenRouter API error: status={response.status_code}, "
                f"reason={response.reason}, error={details}"
            )
            raise UpstreamStatusError(
                response.status_code,
                classify_upstream_error(response.status_code, details),
                details,
            )

        return self._parse_content(response)

    @staticmethod
    def _error_details(response: requests.Response) -> dict[str, Any]:
        """Parse an error body, falling back to the raw text.

        :param response: The failed response.
        :returns: The error body as a dict.
        """
        try:
            data = response.json()
            if isinstance(data, dict):
                return data
            return {"message": str(data)}
        except ValueError:
            return {"message": response.text}

    @staticmethod
    def _parse_content(response: requests.Response) -> str:
        """Extract the generated text from a successful response.

        :param response: The successful response.
        :returns: Content of the first choice.
        :raises MalformedResponseError: If the expected fields are missing.
        """
        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"Unexpected OpenRouter response format: {type(e).__name__}")
            raise MalformedResponseError() from e

        if not isinstance(content, str):
            raise MalformedResponseError()

        logger.debug(f"OpenRouter returned {len(content)} chars")
        return content
