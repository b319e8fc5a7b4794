"""Application configuration powered by pydantic-settings."""

import logging
from functools import lru_cache
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Centralized strongly-typed configuration loaded from `.env`."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PROJECT_NAME: str = "Hello Service"
    PROJECT_VERSION: str = "1.0.0"

    HOST: str = Field("0.0.0.0", description="Interface uvicorn binds to")
    PORT: int = Field(8000, ge=1, le=65535, description="Preferred TCP port for the API")
    RELOAD: bool = False

    LOG_LEVEL: str = Field("INFO", description="Standard logging level name, e.g. DEBUG or WARNING")

    # open for local/dev access by default
    ALLOWED_ORIGINS: List[str] = ["*"]

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Cache and return a singleton Settings instance to avoid re-parsing env."""
    return Settings()


settings = get_settings()
