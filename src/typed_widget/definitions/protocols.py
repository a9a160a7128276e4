# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Protocols for the definition layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from typed_widget.definitions.types import TypeDefinition


@runtime_checkable
class DefinitionResolverProtocol(Protocol):
    """Looks up a schema identifier and returns its definition."""

    def resolve(self, definition_id: str) -> TypeDefinition:
        """Resolve a definition.

        Raises:
            DefinitionNotFoundError: If the identifier is unknown
        """
        ...


@runtime_checkable
class TypedDataProtocol(Protocol):
    """An instantiated value that knows its own definition."""

    @property
    def definition(self) -> TypeDefinition: ...
