"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Access token for the GitHub API and HTTPS clones.

    Read from GITHUB_ACCESS_TOKEN, falling back to GITHUB_TOKEN. When neither
    is set, requests go out unauthenticated.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GITHUB_ACCESS_TOKEN", "GITHUB_TOKEN"),
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
