"""Configuration management for CodeEval."""

from pathlib import Path

from pydantic import Field, SecretStr, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from codeeval.core.constants import CacheLimits, ModelTiers, TimeoutConstants
from codeeval.exceptions import ConfigurationError


class Config(BaseSettings):
    """Application configuration."""

    # LLM Configuration
    llm_provider: str = Field(
        default="gemini",
        alias="CODEEVAL_LLM_PROVIDER",
        description="LLM provider prefix used by LiteLLM (gemini, openai, anthropic, etc.)",
    )
    llm_api_key: SecretStr | None = Field(
        default=None,
        alias="CODEEVAL_LLM_API_KEY",
        description="LLM API key (defaults to provider's env var)",
    )
    llm_temperature: float = Field(
        default=0.2,
        alias="CODEEVAL_LLM_TEMPERATURE",
        description="LLM temperature for responses",
    )
    primary_model: str = Field(
        default=ModelTiers.FAST,
        alias="CODEEVAL_PRIMARY_MODEL",
        description="Model tier used for leaderboard searches",
    )
    fallback_model: str = Field(
        default=ModelTiers.FAST,
        alias="CODEEVAL_FALLBACK_MODEL",
        description="Low-cost model tier retried when the primary tier fails",
    )
    analysis_model: str = Field(
        default=ModelTiers.DEEP,
        alias="CODEEVAL_ANALYSIS_MODEL",
        description="Model used for analysis reports and the playground",
    )

    # Fetch and cache behaviour
    search_timeout_seconds: float = Field(
        default=TimeoutConstants.SEARCH_TIMEOUT_SECONDS,
        alias="CODEEVAL_SEARCH_TIMEOUT",
        description="Seconds to wait for a single upstream search before giving up",
        gt=0,
    )
    cache_ttl_hours: float = Field(
        default=CacheLimits.MAX_CACHE_AGE_HOURS,
        alias="CODEEVAL_CACHE_TTL_HOURS",
        description="Hours a cached leaderboard stays fresh",
        gt=0,
    )
    cache_dir: Path = Field(
        default_factory=lambda: Path.home() / ".codeeval" / "cache",
        alias="CODEEVAL_CACHE_DIR",
        description="Directory for the on-disk leaderboard cache",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


def load_config() -> Config:
    """Load configuration from environment and .env file.

    Raises:
        ConfigurationError: If a setting fails validation
    """
    try:
        return Config()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
