"""FastAPI application configuration."""

import logging

from fastapi import FastAPI

from referent import __version__
from referent.api.articles import router as articles_router
from referent.api.errors import register_error_handlers
from referent.api.health import router as health_router
from referent.api.models import ErrorResponse
from referent.observability.sentry import init_sentry
from referent.utils.logging import configure_logging

configure_logging()
init_sentry()

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    :returns: Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Referent API",
        version=__version__,
        responses={
            400: {"model": ErrorResponse, "description": "Invalid request"},
            500: {"model": ErrorResponse, "description": "Internal server error"},
            502: {"model": ErrorResponse, "description": "Upstream failure"},
            504: {"model": ErrorResponse, "description": "Upstream timed out"},
        },
    )

    register_error_handlers(application)

    # Register routers
    application.include_router(health_router)
    application.include_router(articles_router)

    logger.info("FastAPI application created")

    return application


# Application instance for uvicorn
app = create_app()
