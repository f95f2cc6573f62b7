"""
Exclude Categories configuration.

Resolution order (highest priority first):
  1. Environment variables   (EXCAT_DATABASE__URL=...)
  2. YAML config file        (exclude_categories.yaml)
  3. Defaults defined here
"""

from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class LogFormat(StrEnum):
    JSON = "json"
    CONSOLE = "console"


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1


class DatabaseSettings(BaseModel):
    url: str = "sqlite+aiosqlite:///./exclude_categories.db"
    pool_size: int = 5
    max_overflow: int = 10
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")


class LoggingSettings(BaseModel):
    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON


class Settings(BaseSettings):
    """Root settings — merges env vars, YAML, and defaults."""

    model_config = SettingsConfigDict(
        env_prefix="EXCAT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    env: str = "development"
    server: ServerSettings = Field(default_factory=ServerSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Convenience alias for a flat env var
    log_level: str = ""

    def model_post_init(self, __context: Any) -> None:
        if self.log_level:
            self.logging.level = LogLevel(self.log_level.upper())


def _load_yaml_config() -> dict[str, Any]:
    """Load YAML config file if it exists."""
    search_paths = [
        Path("exclude_categories.yaml"),
        Path("config/exclude_categories.yaml"),
        Path("/etc/exclude_categories/exclude_categories.yaml"),
    ]
    for path in search_paths:
        if path.is_file():
            with open(path) as f:
                return yaml.safe_load(f) or {}
    return {}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    yaml_data = _load_yaml_config()
    return Settings(**yaml_data)
