"""Health check endpoints."""

from referent.api.health.endpoints import router

__all__ = ["router"]
