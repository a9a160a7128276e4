# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Typed data definitions.

A typed data definition describes a value's type, its validation constraints
and its metadata. Definitions form a closed, tagged variant:

- ``primitive``: a leaf value (string, boolean, integer, date/time, ...)
- ``complex``: named nested property definitions
- ``list``: one repeated item definition
- ``entity``: a reference to a full domain entity, with its own properties
- ``field``: an entity field wrapping an item definition plus field settings

Definitions are immutable once created.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Annotated, Any, Final, Literal, Union

from pydantic import Field

from typed_widget.base_model import FrameworkBaseModel

TARGET_TYPE_SETTING: Final = "target_type"


class Capability(str, Enum):
    """Capability tags attached to primitive data types."""

    DATETIME = "DateTime"
    INTEGER = "Integer"
    FLOAT = "Float"
    DURATION = "Duration"


class DataDefinition(FrameworkBaseModel):
    """Metadata shared by every definition variant."""

    label: str = Field(default="", description="Human-readable label")
    description: str = Field(default="", description="Longer help text")
    required: bool = Field(default=False, description="A value must be provided")
    read_only: bool = Field(default=False, description="The value cannot be edited")
    computed: bool = Field(
        default=False, description="The value is derived, never entered"
    )


class PrimitiveDefinition(DataDefinition):
    """Leaf definition with no nested properties."""

    type: Literal["primitive"] = "primitive"
    data_type: str
    constraints: dict[str, Any] = Field(
        default_factory=dict,
        description="Validation constraints in declared order, name to parameters",
    )
    capabilities: frozenset[Capability] = Field(default_factory=frozenset)

    def get_constraint(self, name: str) -> Any | None:
        """Return the parameters of a named constraint, or None."""
        return self.constraints.get(name)

    def has_capability(self, capability: Capability | str) -> bool:
        return Capability(capability) in self.capabilities


class ComplexDefinition(DataDefinition):
    """Composite definition with named property definitions."""

    type: Literal["complex"] = "complex"
    properties: dict[str, TypeDefinition] = Field(default_factory=dict)


class ListDefinition(DataDefinition):
    """Definition wrapping one repeated item definition."""

    type: Literal["list"] = "list"
    item_definition: TypeDefinition


class EntityReferenceDefinition(DataDefinition):
    """Definition of a full domain entity.

    ``properties`` holds the entity's own property definitions, which are
    traversed like a complex definition when no entity form is available.
    """

    type: Literal["entity"] = "entity"
    entity_type_id: str
    instantiation_values: dict[str, Any] = Field(default_factory=dict)
    properties: dict[str, TypeDefinition] = Field(default_factory=dict)


class FieldDefinition(DataDefinition):
    """Entity field definition wrapping an item definition."""

    type: Literal["field"] = "field"
    item_definition: TypeDefinition
    settings: dict[str, Any] = Field(default_factory=dict)

    @property
    def target_type(self) -> str | None:
        """The referenced entity type, when this field is a reference field."""
        return self.settings.get(TARGET_TYPE_SETTING)


TypeDefinition = Annotated[
    Union[
        PrimitiveDefinition,
        ComplexDefinition,
        ListDefinition,
        EntityReferenceDefinition,
        FieldDefinition,
    ],
    Field(discriminator="type"),
]

ComplexDefinition.model_rebuild()
ListDefinition.model_rebuild()
EntityReferenceDefinition.model_rebuild()
FieldDefinition.model_rebuild()


class TypedData(FrameworkBaseModel):
    """An instantiated value together with the definition describing it."""

    definition: TypeDefinition
    value: Any = None


def property_definitions(definition: DataDefinition) -> Mapping[str, Any] | None:
    """Named child definitions of a definition, if it has any.

    Complex and entity definitions expose their own properties; field and
    list definitions expose those of their item definition.
    """
    match definition:
        case ComplexDefinition(properties=properties):
            return properties
        case EntityReferenceDefinition(properties=properties):
            return properties
        case FieldDefinition(item_definition=item) | ListDefinition(
            item_definition=item
        ):
            return property_definitions(item)
        case _:
            return None
