# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: seer
"""
Settings for the handlers ``configure_logging`` installs on the ``seer`` logger.

Values come from ``SEER_LOGGING_*`` environment variables. The library never
reads them on import; only hosts that opt in through ``configure_logging``
do.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Output options for seer's warnings about rejected codes and defaults."""

    model_config = SettingsConfigDict(
        env_prefix="SEER_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    # seer only ever logs warnings, so anything quieter is opt-in
    level: str = Field(default="WARNING", description="Threshold for the seer logger")
    json_format: bool = Field(default=False, description="Write JSON lines")
    include_timestamp: bool = Field(default=True, description="Prefix a timestamp")
    include_level: bool = Field(default=True, description="Show the level name")
    console_enabled: bool = Field(default=True, description="Write to stderr")
    file_path: str | None = Field(
        default=None, description="Also append to this file when set"
    )

    @field_validator("level", mode="before")
    @classmethod
    def validate_level(cls, v: Any) -> str:
        """Accept a level name (any case) or a numeric stdlib level."""
        names = logging.getLevelNamesMapping()
        if isinstance(v, int) and not isinstance(v, bool):
            name = logging.getLevelName(v)
            if name in names:
                return name
        elif isinstance(v, str) and v.strip().upper() in names:
            return v.strip().upper()
        raise ValueError(f"Invalid log level: {v!r}")

    @property
    def stdlib_level(self) -> int:
        """The numeric level handed to ``Logger.setLevel``."""
        return logging.getLevelNamesMapping()[self.level]
