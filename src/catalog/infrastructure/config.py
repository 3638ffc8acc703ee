"""Application configuration."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``CATALOG_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        extra="ignore",
    )

    # Which ProductRepository the composition root builds
    storage: Literal["json", "sql", "memory"] = "json"

    # JSON store
    data_dir: Path = Path("data")

    # SQL store; defaults to a SQLite file inside data_dir
    database_url: str | None = None
    db_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def resolved_database_url(self) -> str:
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'catalog.db'}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
