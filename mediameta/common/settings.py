# mediameta/common/settings.py
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from mediameta.common.strings.splitters import csv_to_list


class APIConfig(BaseModel):
    prefix: str = "/api"

    cors_allow_origins: List[str] = Field(default_factory=lambda: ["http://localhost:5173"])
    cors_allow_methods: List[str] = Field(default_factory=lambda: ["GET", "POST", "OPTIONS"])
    cors_allow_headers: List[str] = Field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = False

    @field_validator("cors_allow_origins", "cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def _split_csv(cls, v):
        return csv_to_list(v)


class DisplayConfig(BaseModel):
    """How numbers and dates are rendered in projections."""
    thousands_sep: str = ","
    decimal_sep: str = "."
    fraction_digits: int = Field(6, ge=0, le=12, description="Max fraction digits for plain numbers")
    # ffprobe writes e.g. "2023-11-29T14:41:04.000000Z"
    date_parse_format: str = "%Y-%m-%dT%H:%M:%S.%f%z"
    date_display_format: str = "%b %d, %Y, %H:%M:%S"


class Settings(BaseSettings):
    # -------- App / Env --------
    app_name: str = "mediameta"
    app_env: str = "development"  # development|test|staging|production
    log_level: str = "INFO"
    tz: str = "UTC"

    # -------- Localization --------
    translations_path: Optional[Path] = Field(
        default=None, description="JSON object mapping English labels to translated text"
    )

    # -------- Sub-configs --------
    api: APIConfig = APIConfig()
    display: DisplayConfig = DisplayConfig()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mediameta.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()
