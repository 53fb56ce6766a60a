"""Sequencing of the fetch, translate and artifact requests for one session."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

from referent.api.client import FailureKind, ReferentAPIClientError
from referent.enums import ArtifactAction, PipelinePhase
from referent.extraction.models import ParsedArticle
from referent.generation.prompts import format_article_for_translation
from referent.session.exceptions import ArtifactPreconditionError
from referent.session.state import PipelineState

logger = logging.getLogger(__name__)

EMPTY_URL_MESSAGE = "Пожалуйста, введите URL статьи"
MALFORMED_MESSAGE = "Неожиданный формат ответа от сервера"
TIMEOUT_MESSAGES: dict[PipelinePhase, str] = {
    PipelinePhase.FETCHING: "Превышено время ожидания загрузки статьи",
    PipelinePhase.TRANSLATING: "Превышено время ожидания перевода",
    PipelinePhase.ANALYZING: "Превышено время ожидания анализа",
}


class ArticleAPI(Protocol):
    """The subset of ReferentAPIClient the session depends on."""

    def parse(self, url: str) -> dict[str, str]: ...

    def translate(self, text: str) -> str: ...

    def analyze(self, text: str, action: str, source_url: str | None = None) -> str: ...


class ArticleSession:
    """Drives the article pipeline for a single user session.

    Responsibilities:
    - Run the fetch and translate leg on an explicit submit
    - Drop submits that arrive while a leg is in flight
    - Run artifact requests against the cached translation
    - Keep PipelineState in step with every request

    Blocking HTTP calls run in a worker thread, so the session itself is
    single-threaded and only yields at network boundaries.
    """

    def __init__(self, client: ArticleAPI) -> None:
        """Initialise the session.

        :param client: API client used for every request.
        """
        self._client = client
        self.state = PipelineState()
        self._leg_in_flight = False
        # Bumped by submit() and reset(); responses from an older epoch are discarded.
        self._epoch = 0

    @property
    def leg_in_flight(self) -> bool:
        """Whether a fetch and translate leg is running."""
        return self._leg_in_flight

    async def submit(self, url: str) -> bool:
        """Fetch, extract and translate an article.

        A call made while another leg is running is dropped, not queued.

        :param url: Article URL.
        :returns: True if the translation is now available.
        """
        if self._leg_in_flight:
            logger.debug("Submit ignored: fetch and translate already in flight")
            return False

        if not url or not url.strip():
            self.state.fail(EMPTY_URL_MESSAGE)
            return False

        self._leg_in_flight = True
        # A new article starts a new epoch; artifacts for the old one are dropped
        self._epoch += 1
        epoch = self._epoch
        try:
            return await self._run_leg(url.strip(), epoch)
        finally:
            self._leg_in_flight = False

    async def _run_leg(self, url: str, epoch: int) -> bool:
        state = self.state
        state.reset()
        state.url = url
        state.phase = PipelinePhase.FETCHING
        logger.info(f"Starting fetch and translate: {url}")

        try:
            fields = await asyncio.to_thread(self._client.parse, url)
            if epoch != self._epoch:
                return False
            article = ParsedArticle(**fields)

            state.phase = PipelinePhase.TRANSLATING
            translation = await asyncio.to_thread(
                self._client.translate, format_article_for_translation(article)
            )
            if epoch != self._epoch:
                return False
        except ReferentAPIClientError as e:
            if epoch == self._epoch:
                self._record_failure(e)
            return False

        state.raw_article = article
        state.translated_text = translation
        state.result = translation
        state.phase = PipelinePhase.IDLE
        logger.info(f"Translation ready: {len(translation)} chars")
        return True

    async def request_artifact(self, action: ArtifactAction) -> str | None:
        """Generate a summary, thesis list or Telegram post.

        Works on the cached translation and never changes it. Overlapping
        requests are allowed; the last response to arrive is displayed.

        :param action: The artifact to produce.
        :returns: The artifact, or None if the request failed.
        :raises ArtifactPreconditionError: If no translation is available yet.
        """
        action = ArtifactAction(action)
        state = self.state
        if state.translated_text is None:
            raise ArtifactPreconditionError(action)

        epoch = self._epoch
        text = state.translated_text
        source_url = state.url if action == ArtifactAction.TELEGRAM else None

        state.phase = PipelinePhase.ANALYZING
        state.last_action = action
        state.error = None
        logger.info(f"Requesting artifact: action={action}")

        try:
            artifact = await asyncio.to_thread(self._client.analyze, text, action.value, source_url)
        except ReferentAPIClientError as e:
            if epoch == self._epoch:
                self._record_failure(e)
            return None

        if epoch != self._epoch:
            return None

        state.last_artifact = artifact
        state.result = artifact
        state.phase = PipelinePhase.IDLE
        return artifact

    def reset(self) -> None:
        """Clear the session back to idle.

        Responses still in flight are discarded when they arrive.
        """
        self._epoch += 1
        self.state.reset()
        logger.debug("Session reset")

    def _record_failure(self, error: ReferentAPIClientError) -> None:
        """Move the state to error with a message for the failed stage.

        :param error: The client failure.
        """
        phase = self.state.phase
        if error.kind == FailureKind.TIMEOUT:
            message = TIMEOUT_MESSAGES.get(phase, str(error))
        elif error.kind == FailureKind.MALFORMED:
            message = MALFORMED_MESSAGE
        else:
            message = str(error)

        logger.warning(f"Pipeline failed during {phase}: kind={error.kind}, message={error}")
        self.state.fail(message)
