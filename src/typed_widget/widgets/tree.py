# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Recursive widget tree builder.

TreeBuilder walks a typed data definition and composes a WidgetSpec tree:

- primitive definitions become leaf widgets (see WidgetTypeSelector)
- complex definitions become a container of their visible properties; with
  zero or one visible property the container is omitted
- list definitions become a container holding one exemplar of the item
- field definitions become a ``fieldgroup`` holding the item widget, or an
  entity autocomplete widget for reference fields
- entity definitions are delegated to EntityFormFallback

Builders are immutable: inclusion toggles are fixed at construction and may be
overridden per call, so one builder can be shared between callers.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from typed_widget.definitions.errors import InvalidPropertyError
from typed_widget.definitions.protocols import (
    DefinitionResolverProtocol,
    TypedDataProtocol,
)
from typed_widget.definitions.types import (
    ComplexDefinition,
    DataDefinition,
    EntityReferenceDefinition,
    FieldDefinition,
    ListDefinition,
    PrimitiveDefinition,
    TypeDefinition,
    property_definitions,
)
from typed_widget.logging import LoggerProtocol, get_logger
from typed_widget.widgets.config import BuilderSettings
from typed_widget.widgets.entity import EntityFormDelegateProtocol, EntityFormFallback
from typed_widget.widgets.errors import InvalidArgumentError, SchemaDepthError
from typed_widget.widgets.filter import InclusionPolicy, PropertyFilter
from typed_widget.widgets.selector import (
    AlterationHook,
    WidgetTypeSelector,
    widget_flags,
)
from typed_widget.widgets.spec import WidgetKind, WidgetSpec


class TreeBuilder:
    """Builds widget spec trees from typed data definitions."""

    def __init__(
        self,
        resolver: DefinitionResolverProtocol,
        *,
        selector: WidgetTypeSelector | None = None,
        alter_hook: AlterationHook | None = None,
        entity_delegate: EntityFormDelegateProtocol | None = None,
        policy: InclusionPolicy | None = None,
        settings: BuilderSettings | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            resolver: Looks up definitions by identifier
            selector: Widget kind selector; built from ``alter_hook`` if omitted
            alter_hook: Optional override of the selected widget kind
            entity_delegate: The host platform's entity form builder, if any
            policy: Inclusion toggles; taken from ``settings`` if omitted
            settings: Builder settings; loaded from the environment if omitted
            logger: Logger to use
        """
        self.settings = settings or BuilderSettings.load()
        self.resolver = resolver
        self.selector = selector or WidgetTypeSelector(alter_hook)
        self.policy = policy or self.settings.to_policy()
        self.logger = logger or get_logger(__name__)
        self.entity_forms = EntityFormFallback(entity_delegate, logger=self.logger)

    def with_policy(
        self, policy: InclusionPolicy | None = None, **toggles: bool
    ) -> TreeBuilder:
        """Return a builder with different inclusion toggles.

        Example:
            ```python
            everything = builder.with_policy(include_read_only=True)
            ```
        """
        new_policy = (policy or self.policy).model_copy(update=toggles)
        builder = copy.copy(self)
        builder.policy = InclusionPolicy.model_validate(new_policy.model_dump())
        return builder

    def build_from_id(
        self,
        definition_id: str,
        property_name: str | None = None,
        instantiation_values: Mapping[str, Any] | None = None,
        *,
        policy: InclusionPolicy | None = None,
    ) -> WidgetSpec:
        """Resolve an identifier and build its widget tree.

        Raises:
            DefinitionNotFoundError: If the identifier cannot be resolved
            InvalidPropertyError: If ``property_name`` is not a property of
                the definition
        """
        definition = self.resolver.resolve(definition_id)
        return self.build_from_definition(
            definition, property_name, instantiation_values, policy=policy
        )

    def build_from_instance(
        self,
        value: TypedDataProtocol,
        property_name: str | None = None,
        *,
        policy: InclusionPolicy | None = None,
    ) -> WidgetSpec:
        """Build the widget tree for the definition attached to a value."""
        return self.build_from_definition(
            value.definition, property_name, policy=policy
        )

    def build_from_definition(
        self,
        definition: TypeDefinition,
        property_name: str | None = None,
        instantiation_values: Mapping[str, Any] | None = None,
        *,
        policy: InclusionPolicy | None = None,
    ) -> WidgetSpec:
        traversal = self._traversal(policy, instantiation_values)
        if property_name is not None:
            return traversal.build_property(definition, property_name)
        return traversal.build(definition)

    def build_list(
        self,
        definition: ListDefinition,
        size: int,
        *,
        policy: InclusionPolicy | None = None,
    ) -> WidgetSpec:
        """Build a list container with ``size`` exemplar children.

        Raises:
            InvalidArgumentError: If ``size`` is negative
        """
        if size < 0:
            raise InvalidArgumentError(
                f"List size must be non-negative, got {size}",
                argument="size",
                value=size,
            )
        return self._traversal(policy, None).build_list(definition, size)

    def _traversal(
        self,
        policy: InclusionPolicy | None,
        instantiation_values: Mapping[str, Any] | None,
    ) -> _Traversal:
        return _Traversal(
            self,
            PropertyFilter(policy or self.policy),
            instantiation_values,
        )


class _Traversal:
    """State of one build call."""

    def __init__(
        self,
        builder: TreeBuilder,
        property_filter: PropertyFilter,
        instantiation_values: Mapping[str, Any] | None,
    ) -> None:
        self.builder = builder
        self.property_filter = property_filter
        self.instantiation_values = instantiation_values
        self.max_depth = builder.settings.max_depth
        self.path: list[str] = []

    def build(self, definition: TypeDefinition, depth: int = 0) -> WidgetSpec:
        if depth > self.max_depth:
            raise SchemaDepthError(self.max_depth, path=self.path)
        self.builder.logger.debug(
            "Building widget",
            definition_type=getattr(definition, "type", type(definition).__name__),
            depth=depth,
        )
        match definition:
            case EntityReferenceDefinition():
                return self.build_entity(definition, depth)
            case ComplexDefinition():
                return self.wrap_properties(
                    definition, self.build_properties(definition.properties, depth)
                )
            case ListDefinition():
                return self.build_list(definition, 1, depth)
            case FieldDefinition():
                return self.build_field(definition, depth)
            case PrimitiveDefinition():
                return self.builder.selector.build(definition)
            case _:
                raise TypeError(
                    f"Unsupported definition type: {type(definition).__name__}"
                )

    def build_properties(
        self, properties: Mapping[str, TypeDefinition], depth: int
    ) -> dict[str, WidgetSpec]:
        children: dict[str, WidgetSpec] = {}
        for name, child in properties.items():
            if not self.property_filter.includes(child):
                continue
            self.path.append(name)
            children[name] = self.build(child, depth + 1)
            self.path.pop()
        return children

    def wrap_properties(
        self, definition: DataDefinition, children: dict[str, WidgetSpec]
    ) -> WidgetSpec:
        if not children:
            return WidgetSpec.empty()
        if len(children) == 1:
            return next(iter(children.values()))
        return container(definition, children)

    def build_list(
        self, definition: ListDefinition, size: int, depth: int = 0
    ) -> WidgetSpec:
        # One exemplar per item; each is built separately.
        items = [self.build(definition.item_definition, depth + 1) for _ in range(size)]
        return container(definition, items)

    def build_field(self, definition: FieldDefinition, depth: int) -> WidgetSpec:
        if definition.target_type:
            item = WidgetSpec(
                kind=WidgetKind.ENTITY_AUTOCOMPLETE,
                title=definition.label,
                description=definition.description,
                target_type=definition.target_type,
                **widget_flags(definition),
            )
        else:
            item = self.build(definition.item_definition, depth + 1)
        return container(definition, [item], kind=WidgetKind.FIELDGROUP)

    def build_entity(
        self,
        definition: EntityReferenceDefinition,
        depth: int,
        property_name: str | None = None,
    ) -> WidgetSpec:
        return self.builder.entity_forms.build(
            definition,
            traverse=lambda entity: self.wrap_properties(
                entity, self.build_properties(entity.properties, depth)
            ),
            property_name=property_name,
            instantiation_values=self.instantiation_values if depth == 0 else None,
        )

    def build_property(
        self, definition: TypeDefinition, property_name: str
    ) -> WidgetSpec:
        """Build a single named property of a definition."""
        match definition:
            case EntityReferenceDefinition(properties=properties):
                if property_name in properties:
                    return self.build_named(property_name, properties[property_name])
                return self.build_entity(definition, 0, property_name=property_name)
            case _:
                properties = property_definitions(definition) or {}
                if property_name not in properties:
                    raise InvalidPropertyError(
                        property_name, getattr(definition, "type", "unknown")
                    )
                return self.build_named(property_name, properties[property_name])

    def build_named(self, name: str, definition: TypeDefinition) -> WidgetSpec:
        self.path.append(name)
        try:
            return self.build(definition, 1)
        finally:
            self.path.pop()


def container(
    definition: DataDefinition,
    children: dict[str, WidgetSpec] | list[WidgetSpec],
    kind: WidgetKind | None = None,
) -> WidgetSpec:
    """Wrap child widgets, titled from the wrapping definition."""
    if kind is None:
        kind = WidgetKind.FIELDSET if definition.label else WidgetKind.CONTAINER
    return WidgetSpec(
        kind=kind,
        title=definition.label,
        description=definition.description,
        is_container=True,
        children=children,
    )
