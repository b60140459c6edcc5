from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="APIENVELOPE_",
        case_sensitive=False,
    )

    app_name: str = "apienvelope"
    log_level: str = "INFO"

    # Attach an audit record to every request and persist it after the response.
    audit_enabled: bool = True
    trace_header: str = "X-Trace-Id"

    cors_allow_origin: str = "http://localhost:3000"
    cors_allow_credentials: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
