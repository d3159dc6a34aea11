"""Application configuration using pydantic-settings pattern."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Date Suggest"
    app_version: str = "0.1.0"
    app_env: str = Field(default="development")
    log_level: str = Field(default="INFO")

    # Suggestion ranking
    max_results: int = Field(
        default=5,
        ge=1,
        description="Maximum number of ranked date suggestions returned",
    )

    # Date engine (dateparser)
    engine_languages: list[str] = Field(default_factory=lambda: ["en"])
    engine_search_fallback: bool = Field(
        default=True,
        description="Search for dates inside the text when the whole string does not parse",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
