"""Pydantic models for extracted article data."""

from pydantic import BaseModel, ConfigDict, Field

# Placeholder returned for any field no heuristic could populate
NOT_FOUND = "Не найдено"


class ParsedArticle(BaseModel):
    """Best-effort title, date and body recovered from an article page."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(default=NOT_FOUND, description="Article headline")
    date: str = Field(default=NOT_FOUND, description="Publication date as found on the page")
    content: str = Field(default=NOT_FOUND, description="Whitespace-normalised body text")

    @property
    def has_content(self) -> bool:
        """Whether the body was recovered."""
        return self.content != NOT_FOUND
