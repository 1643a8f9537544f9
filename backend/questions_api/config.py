"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults reproduce the loopback listener and the CORS allow-list the
      service has always shipped with

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - cors_methods defaults to DELETE only. This does not match the GET-only
      routes; kept literally for compatibility, override with CORS_METHODS
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Listener
    host: str = "127.0.0.1"
    port: int = 3000

    # CORS
    cors_origins: list[str] = ["http://localhost:63342"]
    cors_methods: list[str] = ["DELETE"]

    @field_validator("cors_methods")
    @classmethod
    def upper_case_methods(cls, v: list[str]) -> list[str]:
        return [method.upper() for method in v]

    # Observability
    log_level: str = "INFO"
    log_format: str = "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
