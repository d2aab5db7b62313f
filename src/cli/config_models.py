"""Pydantic configuration models for Peacefully."""

import re
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from journal.dates import get_timezone

_TIME_RE = re.compile(r"^([01][0-9]|2[0-3]):([0-5][0-9])$")


class PathsConfig(BaseModel):
    """File paths configuration."""

    reflections_dir: Path = Path("~/peacefully/reflections")
    log_file: Path = Path("~/peacefully/peacefully.log")

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.reflections_dir = self.reflections_dir.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class ProfileConfig(BaseModel):
    """Who is writing."""

    user_name: str = ""
    onboarding_done: bool = False

    @field_validator("user_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()[:60]


def validate_time(value: str) -> str:
    """Validate a 24h ``HH:MM`` time."""
    if not _TIME_RE.match(value):
        raise ValueError(f"Time must be HH:MM (24h), got {value!r}")
    return value


class ReminderConfig(BaseModel):
    """Daily reminder preference."""

    enabled: bool = False
    time: str = "09:00"

    @field_validator("time")
    @classmethod
    def validate_reminder_time(cls, v: str) -> str:
        return validate_time(v)


class DisplayConfig(BaseModel):
    """Display and calendar preferences."""

    timezone: Optional[str] = None  # None = host local time
    dark_mode: bool = False

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: Optional[str]) -> Optional[str]:
        if v:
            get_timezone(v)
        return v or None


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    json_mode: bool = False
    to_file: bool = False  # write JSON lines to paths.log_file

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class PeacefullyConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    profile: ProfileConfig = Field(default_factory=ProfileConfig)
    reminder: ReminderConfig = Field(default_factory=ReminderConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "PeacefullyConfig":
        """Create config from dict (as loaded from YAML)."""
        if "paths" in data and isinstance(data["paths"], dict):
            for key in ["reflections_dir", "log_file"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        """Plain dict suitable for yaml.safe_dump."""
        return self.model_dump(mode="json")
