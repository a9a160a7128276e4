# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Error classes for the typed widget DI container.
"""

from __future__ import annotations

from typing import Any, Final

from typed_widget.errors.base import (
    ErrorCategory,
    ErrorCode,
    ErrorSeverity,
    TypedWidgetError,
)

DI: Final = ErrorCategory.get_or_create("DI")
DI_ERROR: Final = ErrorCode.get_or_create("DI_ERROR", DI)
DI_SERVICE_NOT_REGISTERED: Final = ErrorCode.get_or_create(
    "DI_SERVICE_NOT_REGISTERED", DI
)
DI_DUPLICATE_REGISTRATION: Final = ErrorCode.get_or_create(
    "DI_DUPLICATE_REGISTRATION", DI
)
DI_SERVICE_CREATION_ERROR: Final = ErrorCode.get_or_create(
    "DI_SERVICE_CREATION_ERROR", DI
)
DI_CONTAINER_DISPOSED: Final = ErrorCode.get_or_create("DI_CONTAINER_DISPOSED", DI)


def _type_name(interface: Any) -> str:
    return getattr(interface, "__name__", str(interface))


class DIError(TypedWidgetError):
    """Base class for all DI-related errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = DI_ERROR,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        **context: Any,
    ) -> None:
        super().__init__(message, code=code, severity=severity, context=context)


class ServiceNotRegisteredError(DIError):
    """Raised when resolving an interface that has no registration."""

    def __init__(self, interface: Any, **context: Any) -> None:
        self.interface = interface
        super().__init__(
            f"Service not registered: {_type_name(interface)}",
            code=DI_SERVICE_NOT_REGISTERED,
            service_type=_type_name(interface),
            **context,
        )


class DuplicateRegistrationError(DIError):
    """Raised when an interface is registered twice without ``replace=True``."""

    def __init__(self, interface: Any, **context: Any) -> None:
        self.interface = interface
        super().__init__(
            f"Service already registered: {_type_name(interface)}",
            code=DI_DUPLICATE_REGISTRATION,
            service_type=_type_name(interface),
            **context,
        )


class ServiceCreationError(DIError):
    """Raised when a registered implementation fails to build."""

    def __init__(
        self, interface: Any, original_error: BaseException, **context: Any
    ) -> None:
        self.interface = interface
        self.original_error = original_error
        super().__init__(
            f"Failed to create service {_type_name(interface)}: {original_error}",
            code=DI_SERVICE_CREATION_ERROR,
            service_type=_type_name(interface),
            original_error_type=type(original_error).__name__,
            **context,
        )


class ContainerDisposedError(DIError):
    """Raised when a disposed container is used."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            "Container is disposed",
            code=DI_CONTAINER_DISPOSED,
            operation=operation,
        )
