"""Liveness and configuration checks."""

import logging

from fastapi import APIRouter, Depends

from referent import __version__
from referent.api.dependencies import settings_dependency
from referent.api.health.models import HealthResponse
from referent.config import ReferentSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get(
    "",
    response_model=HealthResponse,
    summary="Check service health",
    description="Reports the version and whether the generation service can be called.",
)
def health_check(settings: ReferentSettings = Depends(settings_dependency)) -> HealthResponse:
    """Report liveness and whether an OpenRouter key is configured.

    A missing key does not make the service unhealthy: /parse still works.

    :param settings: Settings for this request.
    :returns: Health status response.
    """
    generation_configured = settings.openrouter_api_key is not None
    if not generation_configured:
        logger.warning("Health check: OPENROUTER_API_KEY is not configured")
    return HealthResponse(
        status="healthy",
        version=__version__,
        generation_configured=generation_configured,
    )
