"""Configuration for Referent using pydantic-settings."""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from referent.paths import PROJECT_ROOT

DEFAULT_MODEL = "deepseek/deepseek-chat"
DEFAULT_APP_URL = "http://localhost:3000"
DEFAULT_SOURCE_TEMPLATE = "📎 Источник: {url}"


class ReferentSettings(BaseSettings):
    """Settings for the HTTP API and the console session.

    Loaded from environment variables and an optional ``.env`` file in the
    project root. The API reads a fresh instance per request.

    :param openrouter_api_key: Credential for the generation service.
    :param app_url: Public base URL sent to OpenRouter as the referer.
    :param model: OpenRouter model identifier.
    :param request_timeout: Deadline in seconds for every outbound call.
    :param telegram_source_template: Trailer appended to Telegram posts; must contain ``{url}``.
    :param api_base_url: Where the console session finds the HTTP API.
    """

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    openrouter_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "openrouter_api_key"),
        description="OpenRouter API key",
    )
    app_url: str = Field(
        default=DEFAULT_APP_URL,
        validation_alias=AliasChoices("NEXT_PUBLIC_APP_URL", "APP_URL", "app_url"),
        description="Public base URL of the application",
    )
    model: str = Field(
        default=DEFAULT_MODEL,
        validation_alias=AliasChoices("OPENROUTER_MODEL", "model"),
        description="OpenRouter model identifier",
    )
    request_timeout: float = Field(
        default=30.0,
        gt=0,
        le=300,
        validation_alias=AliasChoices("REQUEST_TIMEOUT", "request_timeout"),
        description="Deadline in seconds for outbound calls",
    )
    telegram_source_template: str = Field(
        default=DEFAULT_SOURCE_TEMPLATE,
        validation_alias=AliasChoices("TELEGRAM_SOURCE_TEMPLATE", "telegram_source_template"),
        description="Source trailer template for Telegram posts",
    )
    api_base_url: str = Field(
        default="http://localhost:8000",
        validation_alias=AliasChoices("REFERENT_API_BASE_URL", "api_base_url"),
        description="Base URL of the Referent HTTP API",
    )

    @field_validator("openrouter_api_key")
    @classmethod
    def blank_key_is_unset(cls, v: str | None) -> str | None:
        """Treat a whitespace-only key as missing.

        :param v: Raw key from the environment.
        :returns: The stripped key, or None if blank.
        """
        if v is None:
            return None
        return v.strip() or None

    @field_validator("telegram_source_template")
    @classmethod
    def validate_source_template(cls, v: str) -> str:
        """Validate that the trailer template has a URL placeholder.

        :param v: Raw template.
        :returns: The validated template.
        :raises ValueError: If ``{url}`` is missing.
        """
        if "{url}" not in v:
            raise ValueError("TELEGRAM_SOURCE_TEMPLATE must contain a {url} placeholder")
        return v


def get_settings() -> ReferentSettings:
    """Load settings from the environment.

    Not cached: each call re-reads the environment.

    :returns: A fresh ReferentSettings instance.
    """
    return ReferentSettings()
