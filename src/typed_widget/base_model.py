# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Base model shared by definitions, widget specs and policies.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class FrameworkBaseModel(BaseModel):
    """Immutable model; unknown fields are rejected unless a subclass allows them."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="forbid",
    )

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dictionary form, by alias, omitting unset (None) values."""
        return self.model_dump(by_alias=True, exclude_none=True)
