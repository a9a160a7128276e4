# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
typed widget: build editable widget trees from typed data definitions.
"""

from typed_widget.definitions import (
    ComplexDefinition,
    DefinitionNotFoundError,
    DefinitionRegistry,
    EntityReferenceDefinition,
    FieldDefinition,
    InvalidPropertyError,
    ListDefinition,
    PrimitiveDefinition,
    TypedData,
    TypeDefinition,
    primitive,
)
from typed_widget.widgets import (
    BuilderSettings,
    EntityFormUnavailableError,
    InclusionPolicy,
    InvalidArgumentError,
    SchemaDepthError,
    TreeBuilder,
    WidgetKind,
    WidgetSpec,
    WidgetTypeSelector,
    register_widget_services,
)

__all__ = [
    "BuilderSettings",
    "ComplexDefinition",
    "DefinitionNotFoundError",
    "DefinitionRegistry",
    "EntityFormUnavailableError",
    "EntityReferenceDefinition",
    "FieldDefinition",
    "InclusionPolicy",
    "InvalidArgumentError",
    "InvalidPropertyError",
    "ListDefinition",
    "PrimitiveDefinition",
    "SchemaDepthError",
    "TreeBuilder",
    "TypeDefinition",
    "TypedData",
    "WidgetKind",
    "WidgetSpec",
    "WidgetTypeSelector",
    "primitive",
    "register_widget_services",
]
