# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget

"""
Public API for typed widget logging.
"""

from __future__ import annotations

from typed_widget.logging.config import LoggingSettings
from typed_widget.logging.level import LogLevel
from typed_widget.logging.logger import (
    StructuredFormatter,
    WidgetJsonEncoder,
    WidgetLogger,
    get_logger,
)
from typed_widget.logging.protocols import LoggerProtocol

__all__ = [
    # Core interfaces
    "LoggerProtocol",
    "LogLevel",
    # Implementation
    "StructuredFormatter",
    "WidgetJsonEncoder",
    "WidgetLogger",
    # Settings
    "LoggingSettings",
    # Factory functions
    "get_logger",
]
