import os
from typing import Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from domain_models.constants import (
    ALLOWED_SUMMARIZATION_MODELS,
    DEFAULT_NOTION_TIMEOUT_MS,
    DEFAULT_SUMMARIZER,
    MAX_PAGE_SIZE,
)


def _safe_getenv(key: str, default: str) -> str:
    """Safely get environment variable with fallback."""
    val = os.getenv(key)
    if val is None or not val.strip():
        return default
    return val


class DigestConfig(BaseModel):
    """
    Configuration for fetching, rendering and summarizing a page.

    Defaults are defined directly in the model or via default_factory using os.getenv.
    Credentials are not part of this model; see `notion_digest.config`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    # Fetch Configuration
    page_size: int = Field(
        default=MAX_PAGE_SIZE,
        ge=1,
        le=MAX_PAGE_SIZE,
        description="Number of child blocks requested per API call.",
    )
    fetch_concurrency: int = Field(
        default=1,
        ge=1,
        description="Maximum number of parallel child-list requests. 1 means sequential.",
    )
    notion_timeout_ms: int = Field(
        default=DEFAULT_NOTION_TIMEOUT_MS,
        ge=1000,
        description="Timeout for a single Notion API request (milliseconds).",
    )

    # Summarization Configuration
    summarization_model: str = Field(
        default_factory=lambda: _safe_getenv("SUMMARIZATION_MODEL", DEFAULT_SUMMARIZER),
        description="Model to use for summarization.",
    )
    llm_temperature: float = Field(
        default=0.0, ge=0.0, le=1.0, description="Sampling temperature for LLM."
    )
    max_retries: int = Field(
        default=3, ge=1, description="Maximum number of attempts for LLM calls."
    )
    retry_multiplier: float = Field(
        default=1.0, ge=0.1, description="Exponential backoff multiplier."
    )
    retry_min_wait: int = Field(
        default=2, ge=0, description="Minimum wait time between retries (seconds)."
    )
    retry_max_wait: int = Field(
        default=10, ge=0, description="Maximum wait time between retries (seconds)."
    )
    max_input_length: int = Field(
        default=200_000, ge=100, description="Maximum length of input text for summarization."
    )

    @field_validator("summarization_model", mode="after")
    @classmethod
    def validate_llm_model(cls, v: str) -> str:
        """Validate LLM model name against whitelist."""
        if v not in ALLOWED_SUMMARIZATION_MODELS:
            msg = f"LLM model '{v}' is not allowed. Allowed: {sorted(ALLOWED_SUMMARIZATION_MODELS)}"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_retry_window(self) -> Self:
        if self.retry_min_wait > self.retry_max_wait:
            msg = (
                f"retry_min_wait ({self.retry_min_wait}) cannot be greater than "
                f"retry_max_wait ({self.retry_max_wait})."
            )
            raise ValueError(msg)
        return self

    @classmethod
    def default(cls) -> Self:
        """
        Returns the default configuration using Pydantic defaults.
        """
        return cls()
