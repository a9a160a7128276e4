# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Configuration for the widget tree builder.

Settings are environment-driven (``TYPED_WIDGET_BUILDER_*``) through
pydantic-settings and read once when a builder is constructed.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from typed_widget.widgets.filter import InclusionPolicy


class BuilderSettings(BaseSettings):
    """Settings for TreeBuilder."""

    model_config = SettingsConfigDict(
        env_prefix="TYPED_WIDGET_BUILDER_",
        extra="ignore",
        case_sensitive=False,
        frozen=True,
    )

    include_non_required: bool = Field(
        default=True, description="Show properties that are not required"
    )
    include_read_only: bool = Field(
        default=False,
        description="Show read-only properties (only when non-required ones are shown)",
    )
    max_depth: int = Field(
        default=32, ge=1, description="Deepest schema nesting the builder will walk"
    )

    def to_policy(self) -> InclusionPolicy:
        return InclusionPolicy(
            include_non_required=self.include_non_required,
            include_read_only=self.include_read_only,
        )

    @classmethod
    def load(cls) -> BuilderSettings:
        """Load builder settings from environment variables or defaults."""
        return cls()
