"""Endpoints for parsing, translating and analysing articles."""

import logging
from typing import NoReturn

from fastapi import APIRouter, Depends, HTTPException, status

from referent.api.articles.models import (
    AnalyzeRequest,
    AnalyzeResponse,
    ParseRequest,
    ParseResponse,
    TranslateRequest,
    TranslateResponse,
)
from referent.api.dependencies import build_generation_client, settings_dependency
from referent.api.errors import UpstreamHTTPException
from referent.config import ReferentSettings
from referent.enums import ArtifactAction
from referent.extraction import (
    PageFetchError,
    PageStatusError,
    PageTimeoutError,
    extract,
    fetch_page,
)
from referent.generation import (
    GenerationError,
    GenerationTimeoutError,
    UpstreamStatusError,
    build_prompt,
    build_translation_prompt,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["articles"])

VALID_ACTIONS = ", ".join(action.value for action in ArtifactAction)


def _raise_for_generation_error(error: GenerationError) -> NoReturn:
    """Translate a generation failure into an HTTP error.

    :param error: The generation failure.
    :raises HTTPException: Always.
    """
    if isinstance(error, UpstreamStatusError):
        raise UpstreamHTTPException(error.status_code, str(error), error.details) from error
    if isinstance(error, GenerationTimeoutError):
        raise HTTPException(
            status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(error)
        ) from error
    # Transport failures and malformed responses both mean a bad gateway
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(error)) from error


@router.post(
    "/parse",
    response_model=ParseResponse,
    summary="Fetch and extract an article",
    description="Downloads the page and extracts its title, date and body text.",
)
def parse_article(
    request: ParseRequest,
    settings: ReferentSettings = Depends(settings_dependency),
) -> ParseResponse:
    """Fetch an article page and extract its fields.

    :param request: Request body with the article URL.
    :param settings: Settings for this request.
    :returns: Extracted title, date and content.
    """
    if not request.url or not request.url.strip():
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="URL не предоставлен")

    try:
        html = fetch_page(request.url, timeout=settings.request_timeout)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except PageTimeoutError as e:
        raise HTTPException(status_code=status.HTTP_504_GATEWAY_TIMEOUT, detail=str(e)) from e
    except PageStatusError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e
    except PageFetchError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    article = extract(html)
    return ParseResponse(date=article.date, title=article.title, content=article.content)


@router.post(
    "/translate",
    response_model=TranslateResponse,
    summary="Translate article text to Russian",
    description="Sends the text to the generation service for English to Russian translation.",
)
def translate_article(
    request: TranslateRequest,
    settings: ReferentSettings = Depends(settings_dependency),
) -> TranslateResponse:
    """Translate article text to Russian.

    :param request: Request body with the text.
    :param settings: Settings for this request.
    :returns: The translation.
    """
    if not request.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Текст для перевода не предоставлен",
        )

    client = build_generation_client(settings)
    logger.info(f"Translating {len(request.text)} chars")

    try:
        translation = client.complete(build_translation_prompt(request.text))
    except GenerationError as e:
        _raise_for_generation_error(e)

    return TranslateResponse(translation=translation)


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Derive an artifact from article text",
    description="Produces a summary, a thesis list or a Telegram post in Russian.",
)
def analyze_article(
    request: AnalyzeRequest,
    settings: ReferentSettings = Depends(settings_dependency),
) -> AnalyzeResponse:
    """Generate a summary, thesis list or Telegram post.

    Telegram posts expect text that is already in Russian.

    :param request: Request body with text, action and optional source URL.
    :param settings: Settings for this request.
    :returns: The generated artifact.
    """
    if not request.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Текст для анализа не предоставлен",
        )

    try:
        action = ArtifactAction(request.action)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Неверный тип действия. Допустимые значения: {VALID_ACTIONS}",
        ) from e

    client = build_generation_client(settings)
    prompt = build_prompt(
        action,
        request.text,
        request.source_url,
        trailer_template=settings.telegram_source_template,
    )
    logger.info(f"Analysing {len(request.text)} chars: action={action}")

    try:
        result = client.complete(prompt)
    except GenerationError as e:
        _raise_for_generation_error(e)

    return AnalyzeResponse(result=result)
