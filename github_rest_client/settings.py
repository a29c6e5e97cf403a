"""Client settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.github.com"
DEFAULT_USER_AGENT = "github-rest-client"


class Settings(BaseSettings):
    """Settings for the GitHub REST client.

    Every field can be set with a ``GITHUB_`` prefixed environment variable,
    e.g. ``GITHUB_TOKEN`` or ``GITHUB_BASE_URL``.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    token: str | None = None
    base_url: str = DEFAULT_BASE_URL
    user_agent: str = Field(default=DEFAULT_USER_AGENT, min_length=1)
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def _check_base_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an absolute http(s) URL, got {value!r}")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
