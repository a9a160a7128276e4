# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Typed data definitions and their resolution.
"""

from typed_widget.definitions.errors import (
    DefinitionError,
    DefinitionNotFoundError,
    DuplicateDefinitionError,
    InvalidPropertyError,
)
from typed_widget.definitions.primitives import STANDARD_PRIMITIVE_TYPES, primitive
from typed_widget.definitions.protocols import (
    DefinitionResolverProtocol,
    TypedDataProtocol,
)
from typed_widget.definitions.registry import DefinitionRegistry
from typed_widget.definitions.types import (
    TARGET_TYPE_SETTING,
    Capability,
    ComplexDefinition,
    DataDefinition,
    EntityReferenceDefinition,
    FieldDefinition,
    ListDefinition,
    PrimitiveDefinition,
    TypedData,
    TypeDefinition,
    property_definitions,
)

__all__ = [
    # Definition variants
    "Capability",
    "ComplexDefinition",
    "DataDefinition",
    "EntityReferenceDefinition",
    "FieldDefinition",
    "ListDefinition",
    "PrimitiveDefinition",
    "TypeDefinition",
    "TypedData",
    "TARGET_TYPE_SETTING",
    "property_definitions",
    # Primitive catalogue
    "STANDARD_PRIMITIVE_TYPES",
    "primitive",
    # Resolution
    "DefinitionRegistry",
    "DefinitionResolverProtocol",
    "TypedDataProtocol",
    # Errors
    "DefinitionError",
    "DefinitionNotFoundError",
    "DuplicateDefinitionError",
    "InvalidPropertyError",
]
