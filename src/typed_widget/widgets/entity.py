# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Entity form fallback.

Entity definitions are rendered with the host platform's own default entity
form when one is available. The host supplies it through an
EntityFormDelegateProtocol implementation; when the delegate is missing or
raises EntityFormUnavailableError, the entity's own property definitions are
traversed like a complex definition instead. The fallback is never surfaced
to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final, Protocol, runtime_checkable

from typed_widget.definitions.types import EntityReferenceDefinition
from typed_widget.logging import LoggerProtocol, get_logger
from typed_widget.widgets.errors import EntityFormUnavailableError
from typed_widget.widgets.spec import WidgetSpec

# Submission controls stripped from host forms.
ACTION_KEYS: Final = ("actions",)


@runtime_checkable
class EntityFormDelegateProtocol(Protocol):
    """The host platform's default entity form builder."""

    def build_default_form(
        self, entity_type_id: str, initial_values: Mapping[str, Any]
    ) -> WidgetSpec:
        """Build the default create/edit form for a transient entity.

        Raises:
            EntityFormUnavailableError: If the entity type has no usable
                default form, or the transient entity cannot be created
        """
        ...


class EntityFormFallback:
    """Builds entity widgets from the host form, or from entity properties."""

    def __init__(
        self,
        delegate: EntityFormDelegateProtocol | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        self.delegate = delegate
        self.logger = logger or get_logger(__name__)

    def build(
        self,
        definition: EntityReferenceDefinition,
        traverse: Callable[[EntityReferenceDefinition], WidgetSpec],
        property_name: str | None = None,
        instantiation_values: Mapping[str, Any] | None = None,
    ) -> WidgetSpec:
        """Build the widget for an entity definition.

        Args:
            definition: The entity definition
            traverse: Builds the entity's own properties as a complex definition
            property_name: Return only this named subtree of the result
            instantiation_values: Values for the transient entity, merged over
                the definition's own instantiation values

        Returns:
            The entity widget, the named subtree, or an empty spec when the
            named subtree is absent
        """
        values = {**definition.instantiation_values, **(instantiation_values or {})}
        try:
            spec = self.build_form(definition.entity_type_id, values)
        except EntityFormUnavailableError as exc:
            self.logger.info(
                "Entity form unavailable, traversing entity properties",
                entity_type_id=definition.entity_type_id,
                reason=exc.reason,
            )
            spec = traverse(definition)

        if property_name is None:
            return spec
        return spec.child(property_name) or WidgetSpec.empty()

    def build_form(
        self, entity_type_id: str, initial_values: Mapping[str, Any]
    ) -> WidgetSpec:
        if self.delegate is None:
            raise EntityFormUnavailableError(
                entity_type_id, reason="no entity form delegate configured"
            )
        form = self.delegate.build_default_form(entity_type_id, initial_values)
        if form is None:
            raise EntityFormUnavailableError(
                entity_type_id, reason="delegate returned no form"
            )
        return form.without_children(*ACTION_KEYS)
