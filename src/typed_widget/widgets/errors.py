# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Widget-building error classes.
"""

from __future__ import annotations

from typing import Any, Final

from typed_widget.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    TypedWidgetError,
)

WIDGET: Final = ErrorCategory.get_or_create("WIDGET")
WIDGET_ERROR: Final = ErrorCode.get_or_create("WIDGET_ERROR", WIDGET)
WIDGET_INVALID_ARGUMENT: Final = ErrorCode.get_or_create(
    "WIDGET_INVALID_ARGUMENT", WIDGET
)
WIDGET_SCHEMA_TOO_DEEP: Final = ErrorCode.get_or_create(
    "WIDGET_SCHEMA_TOO_DEEP", WIDGET
)
WIDGET_ENTITY_FORM_UNAVAILABLE: Final = ErrorCode.get_or_create(
    "WIDGET_ENTITY_FORM_UNAVAILABLE", WIDGET
)


class WidgetError(TypedWidgetError):
    """Base class for all widget-building errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = WIDGET_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message,
            code=code,
            severity=severity,
            context=context,
            **kwargs,
        )


class InvalidArgumentError(WidgetError):
    """Raised when a build entry point receives an argument it cannot honour."""

    def __init__(self, message: str, argument: str, value: Any, **kwargs: Any) -> None:
        self.argument = argument
        self.value = value
        super().__init__(
            message,
            code=WIDGET_INVALID_ARGUMENT,
            argument=argument,
            value=value,
            **kwargs,
        )


class SchemaDepthError(WidgetError):
    """Raised when a schema nests deeper than the configured limit.

    A schema that refers back to itself would otherwise recurse forever.
    """

    def __init__(self, max_depth: int, path: list[str] | None = None, **kwargs: Any) -> None:
        self.max_depth = max_depth
        self.path = list(path or [])
        super().__init__(
            f"Schema nesting exceeds the maximum depth of {max_depth}",
            code=WIDGET_SCHEMA_TOO_DEEP,
            severity=ErrorSeverity.CRITICAL,
            max_depth=max_depth,
            path="/".join(self.path),
            **kwargs,
        )


class EntityFormUnavailableError(WidgetError):
    """Raised by an entity form delegate when no usable default form exists.

    The widget engine always recovers from this error locally by traversing
    the entity's own property definitions instead.
    """

    def __init__(self, entity_type_id: str, reason: str, **kwargs: Any) -> None:
        self.entity_type_id = entity_type_id
        self.reason = reason
        super().__init__(
            f"No default form available for entity type '{entity_type_id}': {reason}",
            code=WIDGET_ENTITY_FORM_UNAVAILABLE,
            severity=ErrorSeverity.WARNING,
            entity_type_id=entity_type_id,
            reason=reason,
            **kwargs,
        )
