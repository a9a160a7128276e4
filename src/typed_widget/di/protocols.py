# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Protocol definitions for the typed widget DI container.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")

ServiceFactoryProtocol = Callable[["ContainerProtocol"], T]
AsyncServiceFactoryProtocol = Callable[["ContainerProtocol"], Awaitable[T]]


@runtime_checkable
class ContainerProtocol(Protocol):
    """Protocol for dependency injection containers."""

    async def register_singleton(
        self, interface: type[Any], implementation: Any, replace: bool = False
    ) -> None:
        """Register a service that is built once per container."""
        ...

    async def register_transient(
        self, interface: type[Any], implementation: Any, replace: bool = False
    ) -> None:
        """Register a service that is built on every resolution."""
        ...

    async def resolve(self, interface: type[T]) -> T:
        """Resolve a service instance."""
        ...

    async def resolve_optional(self, interface: type[T]) -> T | None:
        """Resolve a service instance, or None if it is not registered."""
        ...
