"""Runtime settings, read from ``CATALOG_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve the default data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[3]


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="CATALOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    # Persistence
    data_dir: Path = Field(default=_PROJECT_ROOT / "data")

    # File storage
    upload_dir: Path = Field(default=_PROJECT_ROOT / "data" / "uploads")
    files_base_url: str = Field(default="http://localhost:8080/files")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    log_json: bool = Field(default=False)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def categories_file(self) -> Path:
        return self.data_dir / "categories.json"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
