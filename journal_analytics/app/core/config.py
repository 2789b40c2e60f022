from __future__ import annotations

import logging
import os
from datetime import UTC, date, datetime, tzinfo
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

RANGE_PRESETS = ("7d", "30d", "all")


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
    )

    log_file: Path = Field(default=Path("logs/journal_analytics.log"), alias="LOG_FILE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Analytics engine configuration
    analytics_timezone: str = Field(default="UTC", alias="ANALYTICS_TIMEZONE")
    analytics_default_range: str = Field(default="all", alias="ANALYTICS_DEFAULT_RANGE")
    max_entries_per_request: int = Field(default=10_000, alias="MAX_ENTRIES_PER_REQUEST")
    max_request_bytes: int = Field(default=5_000_000, alias="MAX_REQUEST_BYTES")

    version: str = Field(default_factory=lambda: Settings._load_version())

    @staticmethod
    def _load_version() -> str:
        version_env = os.getenv("VERSION")
        if version_env:
            return version_env
        version_file = Path("VERSION")
        if version_file.exists():
            return version_file.read_text(encoding="utf-8").strip()
        return "0.0.0"

    @field_validator("log_file", mode="before")
    @classmethod
    def _validate_log_file(cls, value: Path | str) -> Path:
        path = Path(value)
        if not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        return path

    @field_validator("log_level", mode="before")
    @classmethod
    def _validate_log_level(cls, value: str | None) -> str:
        if not value:
            return "INFO"
        normalized = str(value).upper()
        if normalized not in logging.getLevelNamesMapping():
            return "INFO"
        return normalized

    @field_validator("analytics_timezone", mode="before")
    @classmethod
    def _validate_timezone(cls, value: str | None) -> str:
        if not value:
            return "UTC"
        name = str(value).strip()
        if name.upper() in {"UTC", "Z"}:
            return "UTC"
        try:
            ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError):
            return "UTC"
        return name

    @field_validator("analytics_default_range", mode="before")
    @classmethod
    def _validate_default_range(cls, value: str | None) -> str:
        if not value:
            return "all"
        normalized = str(value).lower()
        if normalized not in RANGE_PRESETS:
            return "all"
        return normalized

    @field_validator("max_entries_per_request", mode="before")
    @classmethod
    def _validate_max_entries(cls, value: int | str | None) -> int:
        if value is None:
            return 10_000
        return max(int(value), 1)

    @field_validator("max_request_bytes", mode="before")
    @classmethod
    def _validate_max_request_bytes(cls, value: int | str | None) -> int:
        if value is None:
            return 5_000_000
        return max(int(value), 1024)

    def tz(self) -> tzinfo:
        if self.analytics_timezone == "UTC":
            return UTC
        return ZoneInfo(self.analytics_timezone)

    def today(self) -> date:
        """Current calendar date in the configured analytics timezone."""

        return datetime.now(self.tz()).date()


@lru_cache
def get_settings() -> Settings:
    """Cached settings accessor."""

    return Settings()
