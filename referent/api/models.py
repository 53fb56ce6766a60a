"""Pydantic models for API responses."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Standard error response model."""

    error: str = Field(..., description="Human-readable error description")
    details: dict[str, Any] | None = Field(
        default=None, description="Upstream error body, when one was returned"
    )
