# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Base error classes for the typed widget error handling system.

Every error raised by the widget engine carries a registered error code,
a category derived from that code, a severity and free-form context. Codes and
categories are interned in a process-wide registry, so two modules asking for
the same code name get the same object back.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any, Final

from typed_widget.errors.registry import registry


class ErrorSeverity(str, Enum):
    """Severity levels for errors."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    FATAL = "fatal"


class ErrorCategory:
    """Named error category, optionally nested under a parent category."""

    def __init__(self, name: str, parent: ErrorCategory | None = None) -> None:
        self.name = name
        self.parent = parent

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ErrorCategory({self.name!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ErrorCategory) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def ancestors(self) -> list[ErrorCategory]:
        """This category followed by its parents, nearest first."""
        chain: list[ErrorCategory] = []
        current: ErrorCategory | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    def is_subcategory_of(self, category: ErrorCategory) -> bool:
        return category in self.ancestors()

    def get_all_subcategories(self) -> set[ErrorCategory]:
        """This category and every registered category nested below it."""
        return {
            category
            for category in registry.get_all_categories()
            if category.is_subcategory_of(self)
        } | {self}

    @classmethod
    def get_by_name(cls, name: str) -> ErrorCategory | None:
        return registry.lookup_category(name)

    @classmethod
    def get_or_create(
        cls, name: str, parent: ErrorCategory | None = None
    ) -> ErrorCategory:
        """Return the registered category for ``name``, registering it if new."""
        return registry.lookup_category(name) or registry.add_category(
            cls(name, parent)
        )


INTERNAL: Final = ErrorCategory.get_or_create("INTERNAL")


class ErrorCode:
    """A string error code bound to a category."""

    def __init__(self, code: str, category: ErrorCategory | None = None) -> None:
        self.code = code
        self.category = category or INTERNAL

    def __str__(self) -> str:
        return self.code

    def __repr__(self) -> str:
        return f"ErrorCode({self.code!r})"

    def __eq__(self, other: object) -> bool:
        # Codes compare equal to their plain string form too.
        if isinstance(other, str):
            return self.code == other
        return isinstance(other, ErrorCode) and self.code == other.code

    def __hash__(self) -> int:
        return hash(self.code)

    @classmethod
    def get_by_code(
        cls, code: str, *, raise_if_missing: bool = True
    ) -> ErrorCode | None:
        """Look up a registered code.

        Raises:
            ValueError: If the code is unknown and ``raise_if_missing`` is set
        """
        error_code = registry.lookup_code(code)
        if error_code is None and raise_if_missing:
            raise ValueError(f"Error code '{code}' not found in registry")
        return error_code

    @classmethod
    def filter_by_category(cls, category: ErrorCategory) -> list[ErrorCode]:
        """Codes in ``category`` or any category nested below it."""
        return [
            code
            for code in registry.get_all_codes()
            if code.category.is_subcategory_of(category)
        ]

    @classmethod
    def get_or_create(cls, name: str, category: ErrorCategory) -> ErrorCode:
        """Return the registered code for ``name``, registering it if new."""
        return registry.lookup_code(name) or registry.add_code(cls(name, category))


INTERNAL_ERROR: Final = ErrorCode.get_or_create("INTERNAL_ERROR", INTERNAL)


class TypedWidgetError(Exception):
    """
    Base error class for typed widget errors.

    Only package-specific subclasses are raised; instantiating the base class
    directly is a TypeError.
    """

    message: str
    code: ErrorCode
    category: ErrorCategory
    severity: ErrorSeverity
    context: dict[str, Any]
    timestamp: datetime

    def __new__(cls, *args: Any, **kwargs: Any) -> TypedWidgetError:
        if cls is TypedWidgetError:
            raise TypeError(
                "TypedWidgetError is abstract; raise one of its subclasses instead."
            )
        return super().__new__(cls)

    def __init__(
        self,
        message: str,
        code: ErrorCode,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """
        Args:
            message: Human-readable error message
            code: Registered error code; its category becomes the error's
            severity: Severity level of the error
            context: Additional contextual information
            **kwargs: Extra context keys, merged over ``context``
        """
        if not isinstance(code, ErrorCode):
            raise TypeError(
                f"code must be an ErrorCode, got {type(code).__name__}"
            )
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = code.category
        self.severity = severity
        self.context = {**(context or {}), **kwargs}
        self.timestamp = datetime.now(UTC)

    def add_context(self, key: str, value: Any) -> TypedWidgetError:
        """Add one context entry in place; returns self for chaining."""
        self.context[key] = value
        return self

    def with_context(self, context: dict[str, Any]) -> TypedWidgetError:
        """Return a copy of this error with ``context`` merged in."""
        clone = Exception.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone.context = {**self.context, **context}
        clone.__cause__ = self.__cause__
        return clone

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.code,
            "message": self.message,
            "category": self.category.name,
            "severity": self.severity.name,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
        }
