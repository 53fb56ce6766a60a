"""Shared dependencies for API endpoints."""

import logging

from fastapi import HTTPException, status
from pydantic import ValidationError

from referent.config import ReferentSettings, get_settings
from referent.generation.client import GenerationClient
from referent.generation.exceptions import MissingCredentialError

logger = logging.getLogger(__name__)

INVALID_CONFIG_MESSAGE = "Некорректная конфигурация сервиса"


def settings_dependency() -> ReferentSettings:
    """Read settings from the environment for the current request.

    :returns: Fresh settings.
    :raises HTTPException: 500 if a configured value is invalid.
    """
    try:
        return get_settings()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e.errors(include_url=False)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=INVALID_CONFIG_MESSAGE,
        ) from e


def build_generation_client(settings: ReferentSettings) -> GenerationClient:
    """Build a generation client from the request's settings.

    Called after request validation so a bad request never reaches the
    credential check.

    :param settings: Settings for this request.
    :returns: A configured GenerationClient.
    :raises HTTPException: 500 if the API key is not configured.
    """
    try:
        return GenerationClient(
            api_key=settings.openrouter_api_key,
            app_url=settings.app_url,
            model=settings.model,
            timeout=settings.request_timeout,
        )
    except MissingCredentialError as e:
        logger.error("OPENROUTER_API_KEY is not configured")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        ) from e
