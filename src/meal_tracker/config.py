"""Application configuration."""

import os
from pathlib import Path
from typing import Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path.home() / ".meal_tracker"
    entries_filename: str = "food_log.json"
    goals_filename: str = "goals.json"
    decode_policy: Literal["fail_open", "fail_closed"] = "fail_open"
    timezone: str | None = None
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="MEAL_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def entries_path(self) -> Path:
        return self.data_dir.expanduser() / self.entries_filename

    @property
    def goals_path(self) -> Path:
        return self.data_dir.expanduser() / self.goals_filename


def parse_timezone(raw: str | None) -> ZoneInfo | None:
    """Parse the configured timezone; None means the system local zone."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "local"}:
        return None
    try:
        return ZoneInfo(cleaned)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {cleaned}") from exc
