"""Pydantic configuration models for moodlog."""

import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_HOME = Path(os.environ.get("MOODLOG_HOME", "~/moodlog"))


class PathsConfig(BaseModel):
    """File paths configuration."""

    data_dir: Path = DEFAULT_HOME / "data"
    users_file: Path = DEFAULT_HOME / "data" / "users.txt"
    log_file: Path = DEFAULT_HOME / "moodlog.log"

    @model_validator(mode="after")
    def expand_paths(self):
        """Expand ~ in all paths."""
        self.data_dir = self.data_dir.expanduser()
        self.users_file = self.users_file.expanduser()
        self.log_file = self.log_file.expanduser()
        return self


class ReportConfig(BaseModel):
    """Mood report rendering."""

    max_blocks: int = 35
    save: bool = True

    @field_validator("max_blocks")
    @classmethod
    def validate_max_blocks(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_blocks must be >= 1, got {v}")
        return v


class AuthConfig(BaseModel):
    """Login behaviour."""

    max_login_attempts: int = 3

    @field_validator("max_login_attempts")
    @classmethod
    def validate_attempts(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_login_attempts must be >= 1, got {v}")
        return v


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "WARNING"
    file_level: str = "DEBUG"
    json_mode: bool = False

    @field_validator("level", "file_level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}. Must be one of {VALID_LOG_LEVELS}")
        return v_upper


class MoodlogConfig(BaseModel):
    """Main configuration model."""

    paths: PathsConfig = Field(default_factory=PathsConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "MoodlogConfig":
        """Create config from dict, coercing string paths."""
        if "paths" in data:
            for key in ["data_dir", "users_file", "log_file"]:
                if key in data["paths"] and isinstance(data["paths"][key], str):
                    data["paths"][key] = Path(data["paths"][key])

        return cls.model_validate(data)

    def to_dict(self) -> dict:
        return self.model_dump(mode="python")
