"""Logging configuration settings."""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: LogLevel = Field(
        default="WARNING",
        description="Log level for gutensettings loggers",
    )

    json_logs: bool = Field(
        default=False,
        description="Render log records as JSON instead of console output",
    )

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        if isinstance(value, str):
            return value.upper()
        return value
