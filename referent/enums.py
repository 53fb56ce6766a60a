"""Central enum definitions for the project."""

from enum import StrEnum


class ArtifactAction(StrEnum):
    """Kinds of artifact the generation service can derive from an article."""

    SUMMARY = "summary"
    THESES = "theses"
    TELEGRAM = "telegram"


class PipelinePhase(StrEnum):
    """Phase of the fetch, translate and analyse pipeline for one session."""

    IDLE = "idle"
    FETCHING = "fetching"
    TRANSLATING = "translating"
    ANALYZING = "analyzing"
    ERROR = "error"
