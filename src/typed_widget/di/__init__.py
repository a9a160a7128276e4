# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget

"""
Public API for the typed widget DI container.
"""

from __future__ import annotations

from typed_widget.di.container import Container
from typed_widget.di.errors import (
    ContainerDisposedError,
    DIError,
    DuplicateRegistrationError,
    ServiceCreationError,
    ServiceNotRegisteredError,
)
from typed_widget.di.protocols import (
    AsyncServiceFactoryProtocol,
    ContainerProtocol,
    ServiceFactoryProtocol,
)
from typed_widget.di.registration import ServiceLifetime, ServiceRegistration

__all__ = [
    "AsyncServiceFactoryProtocol",
    "Container",
    "ContainerDisposedError",
    "ContainerProtocol",
    "DIError",
    "DuplicateRegistrationError",
    "ServiceCreationError",
    "ServiceFactoryProtocol",
    "ServiceLifetime",
    "ServiceNotRegisteredError",
    "ServiceRegistration",
]
