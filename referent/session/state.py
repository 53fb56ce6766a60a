"""Session-scoped pipeline state."""

from dataclasses import dataclass

from referent.enums import ArtifactAction, PipelinePhase
from referent.extraction.models import ParsedArticle


@dataclass
class PipelineState:
    """Everything the display needs for one user session.

    Mutated only by ArticleSession.
    """

    url: str | None = None
    raw_article: ParsedArticle | None = None
    translated_text: str | None = None
    last_action: ArtifactAction | None = None
    last_artifact: str | None = None
    result: str | None = None
    phase: PipelinePhase = PipelinePhase.IDLE
    error: str | None = None

    @property
    def is_busy(self) -> bool:
        """Whether a request is outstanding."""
        return self.phase in (
            PipelinePhase.FETCHING,
            PipelinePhase.TRANSLATING,
            PipelinePhase.ANALYZING,
        )

    @property
    def artifacts_available(self) -> bool:
        """Whether artifact actions may run."""
        return self.translated_text is not None

    def reset(self) -> None:
        """Return to a fresh idle state."""
        self.url = None
        self.raw_article = None
        self.translated_text = None
        self.last_action = None
        self.last_artifact = None
        self.result = None
        self.phase = PipelinePhase.IDLE
        self.error = None

    def fail(self, message: str) -> None:
        """Enter the error phase with a user-facing message.

        :param message: Message to display.
        """
        self.phase = PipelinePhase.ERROR
        self.error = message
