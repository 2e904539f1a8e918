"""Runtime settings, read from ``PETADMIN_*`` environment variables or ``.env``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="PETADMIN_",
        env_file=".env",
        extra="ignore",
    )

    api_base_url: str = "http://localhost:8080/api"
    api_token: str | None = None
    request_timeout: float = Field(10.0, gt=0)

    data_source: Literal["api", "file"] = "api"
    data_dir: Path = _DEFAULT_DATA_DIR

    page_size: int = Field(10, ge=1)
    search_debounce_seconds: float = Field(0.3, ge=0)
    image_timeout: float = Field(5.0, gt=0)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
