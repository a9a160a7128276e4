# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Widget specification engine.
"""

from typed_widget.widgets.config import BuilderSettings
from typed_widget.widgets.di import register_widget_services
from typed_widget.widgets.entity import (
    ACTION_KEYS,
    EntityFormDelegateProtocol,
    EntityFormFallback,
)
from typed_widget.widgets.errors import (
    EntityFormUnavailableError,
    InvalidArgumentError,
    SchemaDepthError,
    WidgetError,
)
from typed_widget.widgets.filter import InclusionPolicy, PropertyFilter
from typed_widget.widgets.selector import (
    CHOICE_CONSTRAINTS,
    DURATION_MAX_SECONDS,
    AlterationHook,
    WidgetSelection,
    WidgetTypeSelector,
    identity_hook,
)
from typed_widget.widgets.spec import WidgetKind, WidgetSpec
from typed_widget.widgets.tree import TreeBuilder

__all__ = [
    # Output
    "WidgetKind",
    "WidgetSpec",
    # Components
    "AlterationHook",
    "CHOICE_CONSTRAINTS",
    "DURATION_MAX_SECONDS",
    "WidgetSelection",
    "WidgetTypeSelector",
    "identity_hook",
    "InclusionPolicy",
    "PropertyFilter",
    "ACTION_KEYS",
    "EntityFormDelegateProtocol",
    "EntityFormFallback",
    "TreeBuilder",
    # Configuration and wiring
    "BuilderSettings",
    "register_widget_services",
    # Errors
    "EntityFormUnavailableError",
    "InvalidArgumentError",
    "SchemaDepthError",
    "WidgetError",
]
