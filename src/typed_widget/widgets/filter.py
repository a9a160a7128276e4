# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Inclusion policy for nested properties.
"""

from __future__ import annotations

from typed_widget.base_model import FrameworkBaseModel
from typed_widget.definitions.types import DataDefinition


class InclusionPolicy(FrameworkBaseModel):
    """Builder-scoped inclusion toggles.

    Non-required properties are shown by default, read-only ones hidden.
    """

    include_non_required: bool = True
    include_read_only: bool = False


class PropertyFilter:
    """Decides whether a nested property appears in the widget tree."""

    def __init__(self, policy: InclusionPolicy | None = None) -> None:
        self.policy = policy or InclusionPolicy()

    def includes(self, definition: DataDefinition) -> bool:
        policy = self.policy
        if definition.computed:
            return False
        # Read-only needs both toggles, not just its own.
        if definition.read_only:
            return policy.include_non_required and policy.include_read_only
        if not definition.required:
            return policy.include_non_required
        return True

    __call__ = includes
