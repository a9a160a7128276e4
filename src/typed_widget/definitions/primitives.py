# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Catalogue of standard primitive data types and their capability tags.

Capability tags are attached to a primitive type when it is registered, so
widget selection only has to check set membership.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from typed_widget.definitions.types import Capability, PrimitiveDefinition

STANDARD_PRIMITIVE_TYPES: Mapping[str, frozenset[Capability]] = MappingProxyType(
    {
        "string": frozenset(),
        "email": frozenset(),
        "uri": frozenset(),
        "language": frozenset(),
        "boolean": frozenset(),
        "integer": frozenset({Capability.INTEGER}),
        "float": frozenset({Capability.FLOAT}),
        "decimal": frozenset({Capability.FLOAT}),
        "datetime_iso8601": frozenset({Capability.DATETIME}),
        "timestamp": frozenset({Capability.DATETIME, Capability.INTEGER}),
        "duration_iso8601": frozenset({Capability.DURATION}),
        "timespan": frozenset({Capability.DURATION, Capability.INTEGER}),
    }
)


def primitive(
    data_type: str,
    *,
    capabilities: Iterable[Capability | str] | None = None,
    catalogue: Mapping[str, frozenset[Capability]] = STANDARD_PRIMITIVE_TYPES,
    **fields: Any,
) -> PrimitiveDefinition:
    """Create a primitive definition tagged from the type catalogue.

    Args:
        data_type: The primitive data type name
        capabilities: Extra tags merged with the catalogue's tags
        catalogue: Data type to capability mapping to consult
        **fields: Remaining PrimitiveDefinition fields (label, constraints, ...)

    Returns:
        A new primitive definition
    """
    tags = set(catalogue.get(data_type, frozenset()))
    if capabilities:
        tags.update(Capability(tag) for tag in capabilities)
    return PrimitiveDefinition(
        data_type=data_type, capabilities=frozenset(tags), **fields
    )
