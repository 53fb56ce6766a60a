"""Session orchestration for the article pipeline."""

from referent.session.exceptions import ArtifactPreconditionError
from referent.session.labels import ACTION_LABELS, action_from_label
from referent.session.orchestrator import ArticleSession
from referent.session.state import PipelineState

__all__ = [
    "ACTION_LABELS",
    "ArticleSession",
    "ArtifactPreconditionError",
    "PipelineState",
    "action_from_label",
]
