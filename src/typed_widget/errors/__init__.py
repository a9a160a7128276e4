# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget

"""
Error handling for typed widget.
"""

from __future__ import annotations

from typed_widget.errors.base import (
    INTERNAL,
    INTERNAL_ERROR,
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    TypedWidgetError,
)
from typed_widget.errors.registry import ErrorRegistry, registry

__all__ = [
    # Error categories
    "ErrorCode",
    "ErrorCategory",
    "ErrorSeverity",
    "INTERNAL",
    "INTERNAL_ERROR",
    # Base errors
    "TypedWidgetError",
    # Registry
    "ErrorRegistry",
    "registry",
]
