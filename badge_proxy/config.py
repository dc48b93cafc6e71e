"""
Application configuration from environment variables.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    url_update_password: Optional[str] = None
    default_url: Optional[str] = None
    # Seconds; applies to connect, read, write and pool acquisition
    upstream_timeout: float = 30.0
    listen_host: str = "0.0.0.0"
    listen_port: int = 3000
    log_level: str = "DEBUG"
    enable_docs: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )

    @field_validator("url_update_password", "default_url", mode="before")
    @classmethod
    def _empty_as_unset(cls, value):
        # The container image declares both variables as empty strings
        if value == "":
            return None
        return value


@lru_cache
def get_config() -> AppConfig:
    return AppConfig()
