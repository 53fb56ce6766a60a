"""Exceptions raised while loading article pages."""


class PageFetchError(Exception):
    """Base exception for page loading failures.

    Messages are user-facing; lower-level network detail is only logged.
    """


class PageTimeoutError(PageFetchError):
    """Raised when the page does not respond before the deadline."""

    def __init__(self, timeout: float) -> None:
        """Initialise PageTimeoutError.

        :param timeout: The deadline that expired, in seconds.
        """
        self.timeout = timeout
        super().__init__("Превышено время ожидания загрузки страницы")


class PageUnavailableError(PageFetchError):
    """Raised when the page cannot be reached at all."""

    def __init__(self) -> None:
        """Initialise PageUnavailableError."""
        super().__init__("Не удалось загрузить страницу")


class PageStatusError(PageFetchError):
    """Raised when the site answers with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        """Initialise PageStatusError.

        :param status_code: HTTP status returned by the site.
        """
        self.status_code = status_code
        super().__init__(f"Ошибка при загрузке страницы: {status_code}")
