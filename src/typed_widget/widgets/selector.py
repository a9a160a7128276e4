# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Widget kind selection for primitive definitions.

Selection order, first match wins:

1. ``boolean`` data type: checkbox
2. ``DateTime`` capability: datetime
3. ``Integer`` or ``Float`` capability: number
4. an ``AllowedValues`` / ``Choice`` constraint with choices: select
5. anything else: textfield

The optional alteration hook may then replace the kind; kind-specific
properties (bounds, options) are computed for the final kind.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

from pydantic import Field

from typed_widget.base_model import FrameworkBaseModel
from typed_widget.definitions.types import Capability, PrimitiveDefinition
from typed_widget.widgets.spec import WidgetKind, WidgetSpec

AlterationHook = Callable[[str, PrimitiveDefinition], str]

CHOICE_CONSTRAINTS: Final = ("AllowedValues", "Choice")
RANGE_CONSTRAINT: Final = "Range"
DURATION_MIN_SECONDS: Final = 0
DURATION_MAX_SECONDS: Final = 86400


def identity_hook(kind: str, definition: PrimitiveDefinition) -> str:
    """Default alteration hook: keep the selected kind."""
    return kind


class WidgetSelection(FrameworkBaseModel):
    """The chosen widget kind and its kind-specific properties."""

    kind: str
    properties: dict[str, Any] = Field(default_factory=dict)


def choice_options(definition: PrimitiveDefinition) -> dict[Any, Any] | None:
    """Options from the last choice constraint that carries choices."""
    options = None
    for name, params in definition.constraints.items():
        if name not in CHOICE_CONSTRAINTS or not isinstance(params, Mapping):
            continue
        choices = params.get("choices")
        if not choices:
            continue
        if isinstance(choices, Mapping):
            options = dict(choices)
        else:
            options = {value: str(value) for value in choices}
    return options


def widget_flags(definition: Any) -> dict[str, bool]:
    """The ``required`` / ``disabled`` flags every emitted widget carries."""
    flags: dict[str, bool] = {}
    if definition.required:
        flags["required"] = True
    if definition.read_only:
        flags["disabled"] = True
    return flags


class WidgetTypeSelector:
    """Picks a widget kind and its configuration for a primitive definition."""

    def __init__(self, alter_hook: AlterationHook | None = None) -> None:
        self._alter_hook = alter_hook or identity_hook

    def select_kind(self, definition: PrimitiveDefinition) -> str:
        """Choose the widget kind, before the alteration hook runs."""
        if definition.data_type == "boolean":
            return WidgetKind.CHECKBOX.value
        if definition.has_capability(Capability.DATETIME):
            return WidgetKind.DATETIME.value
        if definition.has_capability(Capability.INTEGER) or definition.has_capability(
            Capability.FLOAT
        ):
            return WidgetKind.NUMBER.value
        if choice_options(definition) is not None:
            return WidgetKind.SELECT.value
        return WidgetKind.TEXTFIELD.value

    def kind_properties(
        self, kind: str, definition: PrimitiveDefinition
    ) -> dict[str, Any]:
        """Kind-specific properties plus the universal flags."""
        properties: dict[str, Any] = {}
        match kind:
            case WidgetKind.NUMBER:
                bounds = definition.get_constraint(RANGE_CONSTRAINT)
                if isinstance(bounds, Mapping):
                    properties.update(
                        {
                            key: bounds[key]
                            for key in ("min", "max")
                            if bounds.get(key) is not None
                        }
                    )
                elif definition.has_capability(Capability.DURATION):
                    properties["min"] = DURATION_MIN_SECONDS
                    properties["max"] = DURATION_MAX_SECONDS
            case WidgetKind.SELECT:
                options = choice_options(definition)
                if options is not None:
                    properties["options"] = options
        properties.update(widget_flags(definition))
        return properties

    def select(self, definition: PrimitiveDefinition) -> WidgetSelection:
        kind = self._alter_hook(self.select_kind(definition), definition)
        if isinstance(kind, WidgetKind):
            kind = kind.value
        return WidgetSelection(
            kind=kind, properties=self.kind_properties(kind, definition)
        )

    def build(self, definition: PrimitiveDefinition) -> WidgetSpec:
        """Build the leaf widget spec for a primitive definition."""
        selection = self.select(definition)
        return WidgetSpec(
            kind=selection.kind,
            title=definition.label,
            description=definition.description,
            **selection.properties,
        )
