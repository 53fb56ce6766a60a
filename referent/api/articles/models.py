"""Pydantic models for the article endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class ParseRequest(BaseModel):
    """Request model for fetching and extracting an article."""

    url: str | None = Field(default=None, description="Article URL")


class ParseResponse(BaseModel):
    """Extracted article fields; absent fields hold a placeholder."""

    date: str = Field(..., description="Publication date")
    title: str = Field(..., description="Article headline")
    content: str = Field(..., description="Whitespace-normalised body text")


class TranslateRequest(BaseModel):
    """Request model for translating article text to Russian."""

    text: str | None = Field(default=None, description="Text to translate")


class TranslateResponse(BaseModel):
    """Response model for a translation."""

    translation: str = Field(..., description="Russian translation")


class AnalyzeRequest(BaseModel):
    """Request model for deriving an artifact from article text."""

    model_config = ConfigDict(populate_by_name=True)

    text: str | None = Field(default=None, description="Article text")
    action: str | None = Field(default=None, description="summary, theses or telegram")
    source_url: str | None = Field(
        default=None,
        alias="sourceUrl",
        description="Article URL, appended to Telegram posts",
    )


class AnalyzeResponse(BaseModel):
    """Response model for a derived artifact."""

    result: str = Field(..., description="Generated artifact text")
