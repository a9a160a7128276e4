# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Service registration for the typed widget DI container.
"""

from __future__ import annotations

import enum
import inspect
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ServiceLifetime(str, enum.Enum):
    """How long a resolved service lives."""

    SINGLETON = "singleton"
    TRANSIENT = "transient"


class ServiceRegistration(Generic[T]):
    """Represents a service registration in the DI container.

    A registration contains the interface type, its implementation or factory,
    and the lifetime of the service.
    """

    def __init__(
        self,
        interface: type[T],
        implementation: Any,
        lifetime: ServiceLifetime,
    ) -> None:
        """Initialize a service registration.

        Args:
            interface: The interface type that will be used to resolve the service
            implementation: A concrete type, a factory taking the container, or an instance
            lifetime: The lifetime of the service
        """
        self.interface = interface
        self.implementation = implementation
        self.lifetime = lifetime

    @property
    def is_factory(self) -> bool:
        """True if the implementation is a factory callable rather than a type."""
        return callable(self.implementation) and not isinstance(
            self.implementation, type
        )

    @property
    def is_async_factory(self) -> bool:
        """True if the implementation is an async factory."""
        if not self.is_factory:
            return False
        return inspect.iscoroutinefunction(self.implementation)
