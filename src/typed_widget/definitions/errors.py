# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Definition-specific error classes.

These errors describe schema-shape problems: an identifier the resolver does
not know, a property a definition does not declare, or a conflicting
registration. All of them are fatal to the build that raised them.
"""

from __future__ import annotations

from typing import Any, Final

from typed_widget.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    TypedWidgetError,
)

DEFINITION: Final = ErrorCategory.get_or_create("DEFINITION")
DEFINITION_ERROR: Final = ErrorCode.get_or_create("DEFINITION_ERROR", DEFINITION)
DEFINITION_NOT_FOUND: Final = ErrorCode.get_or_create(
    "DEFINITION_NOT_FOUND", DEFINITION
)
DEFINITION_DUPLICATE: Final = ErrorCode.get_or_create(
    "DEFINITION_DUPLICATE", DEFINITION
)
DEFINITION_INVALID_PROPERTY: Final = ErrorCode.get_or_create(
    "DEFINITION_INVALID_PROPERTY", DEFINITION
)


class DefinitionError(TypedWidgetError):
    """Base class for all definition-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = DEFINITION_ERROR,
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


class DefinitionNotFoundError(DefinitionError):
    """Raised when a definition identifier cannot be resolved."""

    def __init__(self, definition_id: str, **kwargs: Any) -> None:
        self.definition_id = definition_id
        super().__init__(
            f"Definition not found: {definition_id}",
            code=DEFINITION_NOT_FOUND,
            definition_id=definition_id,
            **kwargs,
        )


class DuplicateDefinitionError(DefinitionError):
    """Raised when an identifier is registered twice."""

    def __init__(self, definition_id: str, **kwargs: Any) -> None:
        self.definition_id = definition_id
        super().__init__(
            f"Definition already registered: {definition_id}",
            code=DEFINITION_DUPLICATE,
            definition_id=definition_id,
            **kwargs,
        )


class InvalidPropertyError(DefinitionError):
    """Raised when a requested property does not exist on a definition."""

    def __init__(
        self, property_name: str, definition_type: str, **kwargs: Any
    ) -> None:
        self.property_name = property_name
        self.definition_type = definition_type
        super().__init__(
            f"Property '{property_name}' does not exist on {definition_type} definition",
            code=DEFINITION_INVALID_PROPERTY,
            property_name=property_name,
            definition_type=definition_type,
            **kwargs,
        )
