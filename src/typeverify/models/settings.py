from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVEL_ENV_VAR = "TYPEVERIFY_LOG_LEVEL"


class LibrarySettings(BaseModel):
    log_level: LogLevel = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LibrarySettings":
        """Build settings from environment variables.

        Unset or blank variables fall back to the model defaults.
        """
        env = os.environ if environ is None else environ
        values = {}
        level = env.get(LOG_LEVEL_ENV_VAR)
        if level and level.strip():
            values["log_level"] = level
        return cls(**values)
