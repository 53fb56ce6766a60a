"""Article parse, translate and analyse endpoints."""

from referent.api.articles.endpoints import router

__all__ = ["router"]
