# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Structural type for the loggers the widget engine accepts.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """
    What the engine needs from a logger: leveled calls taking structured
    keyword context, plus ``bind``. For static checking only.
    """

    def debug(self, message: str, **kwargs: Any) -> None: ...

    def info(self, message: str, **kwargs: Any) -> None: ...

    def warning(self, message: str, **kwargs: Any) -> None: ...

    def error(self, message: str, **kwargs: Any) -> None: ...

    def critical(self, message: str, **kwargs: Any) -> None: ...

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR level with the active exception's traceback."""
        ...

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger with additional bound context."""
        ...
