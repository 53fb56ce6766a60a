"""Pydantic models for health check endpoints."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., description="Service health status")
    version: str = Field(..., description="Application version")
    generation_configured: bool = Field(
        ..., description="Whether an OpenRouter API key is configured"
    )
