# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
In-memory definition registry.

This module provides the default DefinitionResolver: a registry of typed data
definitions keyed by schema identifier (``string``, ``map``,
``entity:node``, ``field_item:telephone``...). Each registry carries its own
primitive type catalogue so capability tags can be extended per registry.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from typed_widget.definitions.errors import (
    DefinitionNotFoundError,
    DuplicateDefinitionError,
)
from typed_widget.definitions.primitives import STANDARD_PRIMITIVE_TYPES, primitive
from typed_widget.definitions.types import (
    Capability,
    DataDefinition,
    PrimitiveDefinition,
    TypeDefinition,
)
from typed_widget.logging import get_logger

logger = get_logger(__name__)


class DefinitionRegistry:
    """Registry of typed data definitions that can be turned into widgets.

    The registry satisfies DefinitionResolverProtocol. Standard primitive data
    types resolve out of the box (``registry.resolve("boolean")``), unless an
    explicit definition has been registered under the same identifier.
    """

    def __init__(self, include_standard_primitives: bool = True) -> None:
        """Initialize the registry.

        Args:
            include_standard_primitives: Resolve catalogue data types by name
        """
        self._definitions: dict[str, DataDefinition] = {}
        self._primitive_types: dict[str, frozenset[Capability]] = (
            dict(STANDARD_PRIMITIVE_TYPES) if include_standard_primitives else {}
        )
        self._lock = threading.RLock()

    def register(
        self,
        definition_id: str,
        definition: DataDefinition,
        replace: bool = False,
    ) -> None:
        """Register a definition under an identifier.

        Args:
            definition_id: Schema identifier
            definition: The definition to register
            replace: Overwrite an existing registration instead of failing

        Raises:
            DuplicateDefinitionError: If the identifier is taken and replace is False
        """
        with self._lock:
            if definition_id in self._definitions and not replace:
                raise DuplicateDefinitionError(definition_id)
            self._definitions[definition_id] = definition
        logger.debug(
            "Registered definition",
            definition_id=definition_id,
            definition_type=getattr(definition, "type", None),
        )

    def register_primitive_type(
        self, data_type: str, capabilities: Iterable[Capability | str] = ()
    ) -> None:
        """Add or extend a primitive data type in this registry's catalogue."""
        with self._lock:
            tags = set(self._primitive_types.get(data_type, frozenset()))
            tags.update(Capability(tag) for tag in capabilities)
            self._primitive_types[data_type] = frozenset(tags)

    def create_primitive(self, data_type: str, **fields: Any) -> PrimitiveDefinition:
        """Create a primitive definition tagged from this registry's catalogue."""
        return primitive(data_type, catalogue=self._primitive_types, **fields)

    def resolve(self, definition_id: str) -> TypeDefinition:
        """Resolve an identifier to its definition.

        Raises:
            DefinitionNotFoundError: If the identifier is unknown
        """
        with self._lock:
            definition = self._definitions.get(definition_id)
            if definition is None and definition_id in self._primitive_types:
                definition = self.create_primitive(definition_id)
        if definition is None:
            raise DefinitionNotFoundError(definition_id)
        return definition

    def has(self, definition_id: str) -> bool:
        with self._lock:
            return (
                definition_id in self._definitions
                or definition_id in self._primitive_types
            )

    def list_ids(self) -> list[str]:
        """Registered identifiers, in registration order."""
        with self._lock:
            return list(self._definitions)
