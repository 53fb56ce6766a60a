"""Pydantic models for generation requests."""

from pydantic import BaseModel, ConfigDict, Field


class PromptSpec(BaseModel):
    """A system/user prompt pair with its sampling temperature."""

    model_config = ConfigDict(frozen=True)

    system_prompt: str = Field(..., min_length=1)
    user_prompt: str = Field(..., min_length=1)
    temperature: float = Field(..., ge=0.0, le=2.0)
