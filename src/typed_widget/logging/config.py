# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Logging settings, read from ``TYPED_WIDGET_LOGGING_*`` environment variables.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from typed_widget.logging.level import LogLevel


class LoggingSettings(BaseSettings):
    """Output options shared by every ``WidgetLogger``."""

    model_config = SettingsConfigDict(
        env_prefix="TYPED_WIDGET_LOGGING_",
        extra="ignore",
        case_sensitive=False,
    )

    level: str = Field(default=LogLevel.INFO.value, description="Minimum level name")
    json_format: bool = Field(default=False, description="Emit one JSON object per record")
    include_timestamp: bool = True
    include_level: bool = True
    console_enabled: bool = Field(default=True, description="Write records to stdout")
    file_enabled: bool = False
    file_path: str | None = Field(default=None, description="Used when file_enabled is set")

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, value: Any) -> str:
        match value:
            case LogLevel():
                return value.value
            case str():
                return LogLevel.from_string(value).value
            case _:
                raise ValueError(
                    f"Log level must be a string, got {type(value).__name__}"
                )

    @classmethod
    def load(cls) -> LoggingSettings:
        """Settings from the environment, falling back to defaults."""
        return cls()
