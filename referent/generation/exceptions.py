"""Custom exceptions for the generation module."""

from typing import Any


class GenerationError(Exception):
    """Base exception for generation service failures.

    The message is safe to show to the user.
    """


class MissingCredentialError(GenerationError):
    """Raised when no OpenRouter API key is configured."""

    def __init__(self) -> None:
        """Initialise MissingCredentialError."""
        super().__init__(
            "API ключ OpenRouter не настроен. Добавьте OPENROUTER_API_KEY в .env"
        )


class GenerationTimeoutError(GenerationError):
    """Raised when the generation service does not answer before the deadline."""

    def __init__(self, timeout: float) -> None:
        """Initialise GenerationTimeoutError.

        :param timeout: The deadline that expired, in seconds.
        """
        self.timeout = timeout
        super().__init__("Превышено время ожидания ответа от API")


class GenerationTransportError(GenerationError):
    """Raised when the generation service cannot be reached."""

    def __init__(self) -> None:
        """Initialise GenerationTransportError."""
        super().__init__("Не удалось связаться с API OpenRouter")


class UpstreamStatusError(GenerationError):
    """Raised when the generation service answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialise UpstreamStatusError.

        :param status_code: HTTP status returned by the service.
        :param message: Classified, human-readable message.
        :param details: Parsed upstream error body, for diagnostics.
        """
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class MalformedResponseError(GenerationError):
    """Raised when a successful response lacks the generated text."""

    def __init__(self) -> None:
        """Initialise MalformedResponseError."""
        super().__init__("Неожиданный формат ответа от API")
