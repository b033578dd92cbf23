"""Runtime settings for dictkit, read from the environment."""

import os
from pydantic import BaseModel, Field, field_validator

__all__ = ["Settings", "settings"]

LOG_LEVELS = ("NOTSET", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    LOG_LEVEL: str = DEFAULT_LOG_LEVEL
    LOG_FORMAT: str = Field(default=DEFAULT_LOG_FORMAT, min_length=1)

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got '{value}'."
            )
        return level

    @classmethod
    def load(cls) -> "Settings":
        """Build settings from ``DICTKIT_*`` environment variables.

        ``DICTKIT_LOG_LEVEL`` takes precedence over the generic ``LOG_LEVEL``
        and must be valid. The generic variable belongs to the host
        application, so a value dictkit does not recognise is ignored.
        """
        values = {}

        level = os.getenv("DICTKIT_LOG_LEVEL")
        if level:
            values["LOG_LEVEL"] = level
        else:
            generic = os.getenv("LOG_LEVEL", "").strip().upper()
            if generic in LOG_LEVELS:
                values["LOG_LEVEL"] = generic

        log_format = os.getenv("DICTKIT_LOG_FORMAT")
        if log_format:
            values["LOG_FORMAT"] = log_format

        return cls(**values)


settings = Settings.load()
