# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Widget specifications.

A WidgetSpec is the renderer-agnostic description of one form element: its
kind, title, description and kind-specific properties, plus nested children
when it is a container. Specs are immutable values; host renderers read them
through ``to_dict()``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field, field_validator

from typed_widget.base_model import FrameworkBaseModel


class WidgetKind(str, Enum):
    """Widget kinds emitted by the engine."""

    # Leaf widgets
    TEXTFIELD = "textfield"  # Single-line text input
    CHECKBOX = "checkbox"  # Boolean checkbox
    NUMBER = "number"  # Numeric input
    SELECT = "select"  # Dropdown over allowed values
    DATETIME = "datetime"  # Date/time picker
    ENTITY_AUTOCOMPLETE = "entity_autocomplete"  # Entity reference picker

    # Containers
    FIELDSET = "fieldset"  # Labelled group
    CONTAINER = "container"  # Unlabelled group
    FIELDGROUP = "fieldgroup"  # Entity field wrapper

    @classmethod
    def is_container_kind(cls, value: str) -> bool:
        return value in (cls.FIELDSET.value, cls.CONTAINER.value, cls.FIELDGROUP.value)


class WidgetSpec(FrameworkBaseModel):
    """Description of a form element.

    Unknown keyword arguments are kept as extra properties, so host forms and
    alteration hooks can carry renderer-specific keys (``target_type``,
    ``#attributes``...) without a schema change.
    """

    model_config = ConfigDict(extra="allow")

    kind: str | None = None
    title: str | None = None
    description: str | None = None
    required: bool | None = None
    disabled: bool | None = None
    min: int | float | None = None
    max: int | float | None = None
    options: dict[Any, Any] | None = None
    is_container: bool | None = Field(default=None, alias="isContainer")
    children: dict[str, WidgetSpec] | list[WidgetSpec] | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, v: Any) -> Any:
        """Store enum kinds as their plain string value."""
        if isinstance(v, WidgetKind):
            return v.value
        return v

    @classmethod
    def empty(cls) -> WidgetSpec:
        """The spec that renders nothing."""
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.to_dict()

    def child(self, name: str | int) -> WidgetSpec | None:
        """Return a named (or, for list containers, indexed) child, if present."""
        match self.children:
            case dict() as children:
                return children.get(str(name))
            case list() as children if isinstance(name, int):
                return children[name] if -len(children) <= name < len(children) else None
            case _:
                return None

    def without_children(self, *names: str) -> WidgetSpec:
        """Return a copy with the named children and extra properties removed."""
        data = self.to_dict()
        for name in names:
            data.pop(name, None)
        children = data.get("children")
        if isinstance(children, dict):
            data["children"] = {
                key: value for key, value in children.items() if key not in names
            }
        return type(self).model_validate(data)


WidgetSpec.model_rebuild()
