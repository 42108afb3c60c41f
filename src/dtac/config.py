"""Lightweight configuration for the dtac tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dtac.domain.enums import GameMode


class Settings(BaseSettings):
    """Application settings read from ``DTAC_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="DTAC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    game_constants_path: Path | None = Field(
        default=None, description="GameConstants.xml loaded when the API starts"
    )
    game_mode: GameMode = Field(
        default=GameMode.UNDEFINED, description="Ruleset whose hardcoded types are enforced"
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
