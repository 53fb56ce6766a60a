"""Prompt building and the OpenRouter generation client."""

from referent.generation.client import GenerationClient, classify_upstream_error
from referent.generation.exceptions import (
    GenerationError,
    GenerationTimeoutError,
    GenerationTransportError,
    MalformedResponseError,
    MissingCredentialError,
    UpstreamStatusError,
)
from referent.generation.models import PromptSpec
from referent.generation.prompts import (
    build_prompt,
    build_translation_prompt,
    format_article_for_translation,
    render_source_trailer,
)

__all__ = [
    "GenerationClient",
    "GenerationError",
    "GenerationTimeoutError",
    "GenerationTransportError",
    "MalformedResponseError",
    "MissingCredentialError",
    "PromptSpec",
    "UpstreamStatusError",
    "build_prompt",
    "build_translation_prompt",
    "classify_upstream_error",
    "format_article_for_translation",
    "render_source_trailer",
]
