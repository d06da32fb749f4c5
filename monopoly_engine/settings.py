"""
Central application configuration using pydantic-settings.

Environment variables (prefix: MONOPOLY_):
    MONOPOLY_LOG_LEVEL      - Python logging level (default: INFO)
    MONOPOLY_STORAGE        - memory | sql (default: memory)
    MONOPOLY_DATABASE_URL   - SQLAlchemy URL used when MONOPOLY_STORAGE=sql
    MONOPOLY_DB_ECHO        - Echo SQL statements (default: false)
    MONOPOLY_SEED           - Fixed RNG seed for dice and shuffles (default: unset)
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from monopoly_engine.config import GameConfig


class StorageBackend(str, Enum):
    """Supported snapshot stores."""

    MEMORY = "memory"
    SQL = "sql"


class EngineSettings(BaseSettings):
    """Deployment configuration for the engine host."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="MONOPOLY_",
    )

    log_level: str = Field(default="INFO", description="Python logging level name.")
    storage: StorageBackend = Field(
        default=StorageBackend.MEMORY,
        description="Where game snapshots are kept (memory | sql).",
    )
    database_url: str = Field(
        default="sqlite:///./monopoly_games.db",
        description="SQLAlchemy URL for the snapshot table.",
    )
    db_echo: bool = Field(default=False)
    seed: Optional[int] = Field(default=None, description="Seed for dice and deck shuffles.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept any case, reject names the logging module does not know."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    def game_config(self) -> GameConfig:
        return GameConfig(seed=self.seed)


@lru_cache
def get_settings() -> EngineSettings:
    """Return cached settings instance."""
    return EngineSettings()
