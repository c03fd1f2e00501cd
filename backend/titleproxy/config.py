"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - The YouTube API credential comes from the environment or the CLI (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - Settings is passed explicitly to create_app(); handlers never read env vars

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Credential is required: the service has nothing useful to do without it
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # YouTube Data API
    youtube_api_key: str
    youtube_api_base_url: str = "https://youtube.googleapis.com/youtube/v3"
    youtube_timeout_seconds: float = 5.0

    @field_validator("youtube_api_key")
    @classmethod
    def require_api_key(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("youtube_api_key cannot be empty")
        return v

    @field_validator("youtube_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    # Server
    host: str = "0.0.0.0"  # nosec B104
    port: int = 8000

    # Tracing
    tracing_service_name: str = "myApp"
    tracing_segment_pattern: str = "youtube.googleapis.com"
    tracing_exporter: Literal["otlp", "console", "none"] = "none"
    tracing_otlp_endpoint: str | None = None

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
