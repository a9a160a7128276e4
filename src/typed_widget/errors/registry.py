# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Process-wide registry of error categories and codes.

A category or code is registered once by name; registering the same name
again returns the object that was registered first.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typed_widget.errors.base import ErrorCategory, ErrorCode


class ErrorRegistry:
    """Thread-safe store of every error category and code in the process."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._categories: dict[str, ErrorCategory] = {}
        self._codes: dict[str, ErrorCode] = {}

    def add_category(self, category: ErrorCategory) -> ErrorCategory:
        """Register a category unless one with the same name exists.

        Returns:
            The registered category for that name
        """
        with self._lock:
            return self._categories.setdefault(category.name, category)

    def add_code(self, code: ErrorCode) -> ErrorCode:
        """Register a code unless one with the same string exists."""
        with self._lock:
            return self._codes.setdefault(code.code, code)

    def lookup_category(self, name: str) -> ErrorCategory | None:
        with self._lock:
            return self._categories.get(name)

    def lookup_code(self, code: str) -> ErrorCode | None:
        with self._lock:
            return self._codes.get(code)

    def get_all_categories(self) -> list[ErrorCategory]:
        with self._lock:
            return list(self._categories.values())

    def get_all_codes(self) -> list[ErrorCode]:
        with self._lock:
            return list(self._codes.values())


registry = ErrorRegistry()
