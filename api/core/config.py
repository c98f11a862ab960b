"""
Process settings, read once from the environment (and `.env` if present).
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    db_url: str = ""

    # Directory served under /app.
    filepath_root: str = "."

    host: str = "0.0.0.0"
    port: int = 8088
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
