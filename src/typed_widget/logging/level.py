# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Log levels for typed widget logging.
"""

from __future__ import annotations

import logging
from enum import Enum

_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}


class LogLevel(str, Enum):
    """Log levels accepted in settings and by ``set_level``."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_stdlib_level(self) -> int:
        return logging.getLevelNamesMapping()[self.value]

    @classmethod
    def from_stdlib_level(cls, level: int) -> LogLevel:
        """Nearest level at or below a stdlib level number."""
        for member in reversed(list(cls)):
            if member.to_stdlib_level() <= level:
                return member
        return cls.DEBUG

    @classmethod
    def from_string(cls, value: str) -> LogLevel:
        """Parse a level name, case-insensitively; ``warn`` and ``fatal`` are accepted.

        Raises:
            ValueError: If the name is not a known level
        """
        name = value.strip().upper()
        try:
            return cls(_ALIASES.get(name, name))
        except ValueError:
            raise ValueError(f"Invalid log level: {value}") from None
