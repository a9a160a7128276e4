# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Async service container the widget engine is wired into.
"""

from __future__ import annotations

import contextlib
import inspect
from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any, TypeVar

from typed_widget.di.errors import (
    ContainerDisposedError,
    DuplicateRegistrationError,
    ServiceCreationError,
    ServiceNotRegisteredError,
)
from typed_widget.di.registration import ServiceLifetime, ServiceRegistration
from typed_widget.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class Container:
    """Maps service interfaces to implementations with a lifetime.

    A singleton is built on first resolution and cached until ``dispose``;
    a transient is built on every resolution. Implementations may be a class
    (called with no arguments), a factory taking the container (sync or
    async), or a ready instance.
    """

    def __init__(self) -> None:
        self._registrations: dict[Any, ServiceRegistration[Any]] = {}
        self._singletons: dict[Any, Any] = {}
        self._disposed: bool = False

    @classmethod
    async def create(
        cls, configurator: Callable[[Container], Awaitable[None]]
    ) -> Container:
        """Build a container and let ``configurator`` register its services.

        Example:
            ```python
            async def configure(c):
                await register_widget_services(c, registry)

            container = await Container.create(configure)
            builder = await container.resolve(TreeBuilder)
            ```
        """
        container = cls()
        await configurator(container)
        return container

    def _check_not_disposed(self, operation: str) -> None:
        if self._disposed:
            raise ContainerDisposedError(operation)

    async def get_registration_keys(self) -> list[str]:
        """Get all registered service keys (type names)."""
        self._check_not_disposed("get_registration_keys")
        return [getattr(t, "__name__", str(t)) for t in self._registrations]

    async def register_singleton(
        self,
        interface: type[Any],
        implementation: Any,
        replace: bool = False,
    ) -> None:
        await self._register(
            interface, implementation, ServiceLifetime.SINGLETON, replace
        )

    async def register_transient(
        self,
        interface: type[Any],
        implementation: Any,
        replace: bool = False,
    ) -> None:
        await self._register(
            interface, implementation, ServiceLifetime.TRANSIENT, replace
        )

    async def _register(
        self,
        interface: type[Any],
        implementation: Any,
        lifetime: ServiceLifetime,
        replace: bool = False,
    ) -> None:
        self._check_not_disposed("register")
        if interface in self._registrations:
            if not replace:
                raise DuplicateRegistrationError(interface)
            self._singletons.pop(interface, None)
        self._registrations[interface] = ServiceRegistration(
            interface, implementation, lifetime
        )
        logger.debug(
            "Registered service",
            service=getattr(interface, "__name__", str(interface)),
            lifetime=lifetime.value,
        )

    async def create_service(self, registration: ServiceRegistration[Any]) -> Any:
        implementation = registration.implementation
        if not callable(implementation):
            return implementation
        try:
            if not registration.is_factory:
                return implementation()
            result = implementation(self)
            return await result if inspect.isawaitable(result) else result
        except Exception as exc:
            raise ServiceCreationError(registration.interface, exc) from exc

    async def resolve(self, interface: type[T]) -> T:
        """Resolve a service instance asynchronously.

        Args:
            interface: The interface type of the service to resolve

        Returns:
            An instance of the requested service

        Raises:
            ServiceNotRegisteredError: If the service is not registered
            ServiceCreationError: If the implementation fails to build
        """
        self._check_not_disposed("resolve")

        registration = self._registrations.get(interface)
        if registration is None:
            raise ServiceNotRegisteredError(interface)

        match registration.lifetime:
            case ServiceLifetime.SINGLETON:
                if interface not in self._singletons:
                    self._singletons[interface] = await self.create_service(registration)
                return self._singletons[interface]
            case ServiceLifetime.TRANSIENT:
                return await self.create_service(registration)

    async def resolve_optional(self, interface: type[T]) -> T | None:
        """Resolve a service instance or return None if not registered."""
        self._check_not_disposed("resolve_optional")
        if interface not in self._registrations:
            return None
        return await self.resolve(interface)

    async def dispose(self) -> None:
        """Dispose the container and all singleton services.

        Services exposing ``dispose()`` or ``close()`` (sync or async) are
        released. After disposal every operation raises ContainerDisposedError.
        """
        if self._disposed:
            return
        self._disposed = True

        for service in reversed(list(self._singletons.values())):
            for name in ("dispose", "close"):
                release = getattr(service, name, None)
                if callable(release):
                    result = release()
                    if inspect.isawaitable(result):
                        await result
                    break
        self._singletons.clear()
        self._registrations.clear()

    @contextlib.asynccontextmanager
    async def use(self) -> AsyncGenerator[Container]:
        """Context manager that disposes the container on exit."""
        try:
            yield self
        finally:
            await self.dispose()
