# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Structured logging for typed widget.

Loggers wrap the standard library ``logging`` module. Keyword arguments passed
to a log call become structured context, rendered as ``key=value`` pairs in
text mode or as top-level keys in JSON mode.
"""

from __future__ import annotations

import contextlib
import copy
import datetime
import enum
import json
import logging
import sys
import uuid
from collections.abc import Generator
from typing import TYPE_CHECKING, Any

from typed_widget.logging.config import LoggingSettings
from typed_widget.logging.level import LogLevel

if TYPE_CHECKING:
    from typed_widget.logging.protocols import LoggerProtocol

_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime"}

_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _render(value: Any) -> str:
    """Render a context value for text output."""
    match value:
        case str():
            return f'"{value}"' if " " in value else value
        case enum.Enum():
            return str(value.value)
        case datetime.datetime() | datetime.date():
            return value.isoformat()
        case uuid.UUID() | BaseException():
            return str(value)
        case _:
            try:
                return json.dumps(value, cls=WidgetJsonEncoder)
            except (TypeError, ValueError):
                return str(value)


class WidgetJsonEncoder(json.JSONEncoder):
    """JSON encoder for log context; unknown objects fall back to ``str``."""

    def default(self, obj: Any) -> Any:
        match obj:
            case datetime.datetime() | datetime.date():
                return obj.isoformat()
            case enum.Enum():
                return obj.value
            case set() | frozenset():
                return sorted(str(item) for item in obj)
            case _ if hasattr(obj, "model_dump"):
                return obj.model_dump()
            case _:
                return str(obj)


class StructuredFormatter(logging.Formatter):
    """Formats records with their structured context.

    Text mode: ``[timestamp] message [LEVEL] key=value ...``
    JSON mode: one object with ``message``, ``logger``, the context keys and,
    when enabled, ``level`` and ``timestamp``.
    """

    def __init__(
        self,
        json_format: bool = False,
        include_timestamp: bool = True,
        include_level: bool = True,
    ) -> None:
        super().__init__(datefmt=_TIME_FORMAT)
        self.json_format = json_format
        self.include_timestamp = include_timestamp
        self.include_level = include_level

    @staticmethod
    def record_context(record: logging.LogRecord) -> dict[str, Any]:
        """Structured context carried on a record as extra attributes."""
        return {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_KEYS
        }

    def format(self, record: logging.LogRecord) -> str:
        context = self.record_context(record)
        if self.json_format:
            return self._format_json(record, context)
        return self._format_text(record, context)

    def _format_text(self, record: logging.LogRecord, context: dict[str, Any]) -> str:
        parts = []
        if self.include_timestamp:
            parts.append(self.formatTime(record, self.datefmt))
        parts.append(record.getMessage())
        if self.include_level:
            parts.append(f"[{record.levelname}]")
        parts.extend(f"{key}={_render(value)}" for key, value in context.items())
        text = " ".join(parts)
        if record.exc_info:
            text = f"{text}\n{self.formatException(record.exc_info)}"
        return text

    def _format_json(self, record: logging.LogRecord, context: dict[str, Any]) -> str:
        payload: dict[str, Any] = {
            "message": record.getMessage(),
            "logger": record.name,
            **context,
        }
        if self.include_level:
            payload["level"] = record.levelname
        if self.include_timestamp:
            payload["timestamp"] = self.formatTime(record, self.datefmt)
        if record.exc_info:
            payload["error"] = str(record.exc_info[1])
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, cls=WidgetJsonEncoder)


def _build_handlers(settings: LoggingSettings) -> list[logging.Handler]:
    formatter = StructuredFormatter(
        json_format=settings.json_format,
        include_timestamp=settings.include_timestamp,
        include_level=settings.include_level,
    )
    handlers: list[logging.Handler] = []
    if settings.console_enabled:
        handlers.append(logging.StreamHandler(sys.stdout))
    if settings.file_enabled and settings.file_path:
        handlers.append(logging.FileHandler(settings.file_path))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers or [logging.NullHandler()]


class WidgetLogger:
    """Structured logger used throughout typed widget."""

    def __init__(
        self,
        name: str,
        level: str | None = None,
        settings: LoggingSettings | None = None,
    ) -> None:
        """
        Args:
            name: Logger name, usually the module ``__name__``
            level: Level name overriding the settings level
            settings: Logging settings; loaded from the environment if omitted
        """
        self.name = name
        self._settings = settings or LoggingSettings.load()
        self._logger = logging.getLogger(name)
        self._bound_context: dict[str, Any] = {}
        self._context: dict[str, Any] = {}

        self._logger.handlers = _build_handlers(self._settings)
        self._logger.propagate = False
        self._logger.setLevel(LogLevel.from_string(level or self._settings.level).value)

    def _log(self, level: int, msg: str, exc_info: Any = None, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(level):
            return
        context = {**self._bound_context, **self._context, **kwargs}
        # Keys clashing with LogRecord attributes are prefixed with ctx_
        extra = {
            (f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key): value
            for key, value in context.items()
        }
        self._logger.log(level, msg, exc_info=exc_info, extra=extra)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log at ERROR with the active exception attached."""
        self._log(logging.ERROR, message, exc_info=True, **kwargs)

    def set_level(self, level: LogLevel) -> None:
        self._logger.setLevel(level.to_stdlib_level())

    @contextlib.contextmanager
    def context(self, **kwargs: Any) -> Generator[None]:
        """Add context to this logger's records for the duration of the block."""
        saved = self._context
        self._context = {**saved, **kwargs}
        try:
            yield
        finally:
            self._context = saved

    def bind(self, **kwargs: Any) -> LoggerProtocol:
        """Return a logger sharing this one's output, with extra bound context."""
        bound = copy.copy(self)
        bound._bound_context = {**self._bound_context, **kwargs}
        bound._context = {}
        return bound


def get_logger(name: str, level: LogLevel | None = None) -> LoggerProtocol:
    """Get a configured logger for ``name`` (typically ``__name__``)."""
    logger = WidgetLogger(name, settings=LoggingSettings.load())
    if level is not None:
        logger.set_level(level)
    return logger
