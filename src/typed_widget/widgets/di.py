# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: typed widget
"""
Dependency injection wiring for the widget engine.
"""

from __future__ import annotations

from typed_widget.definitions.protocols import DefinitionResolverProtocol
from typed_widget.di.protocols import ContainerProtocol
from typed_widget.logging import get_logger
from typed_widget.widgets.config import BuilderSettings
from typed_widget.widgets.entity import EntityFormDelegateProtocol
from typed_widget.widgets.selector import AlterationHook, WidgetTypeSelector
from typed_widget.widgets.tree import TreeBuilder

logger = get_logger(__name__)


async def register_widget_services(
    container: ContainerProtocol,
    resolver: DefinitionResolverProtocol,
    *,
    entity_delegate: EntityFormDelegateProtocol | None = None,
    alter_hook: AlterationHook | None = None,
    settings: BuilderSettings | None = None,
) -> None:
    """Register the widget engine services with a container.

    Registers the resolver, builder settings, a WidgetTypeSelector and a
    TreeBuilder singleton assembled from them.

    Example:
        ```python
        container = await Container.create(
            lambda c: register_widget_services(c, registry)
        )
        builder = await container.resolve(TreeBuilder)
        ```
    """
    settings = settings or BuilderSettings.load()

    await container.register_singleton(BuilderSettings, settings)
    await container.register_singleton(DefinitionResolverProtocol, resolver)
    await container.register_singleton(
        WidgetTypeSelector, lambda _: WidgetTypeSelector(alter_hook)
    )
    if entity_delegate is not None:
        await container.register_singleton(
            EntityFormDelegateProtocol, entity_delegate
        )

    async def tree_builder_factory(c: ContainerProtocol) -> TreeBuilder:
        return TreeBuilder(
            await c.resolve(DefinitionResolverProtocol),
            selector=await c.resolve(WidgetTypeSelector),
            entity_delegate=await c.resolve_optional(EntityFormDelegateProtocol),
            settings=await c.resolve(BuilderSettings),
        )

    await container.register_singleton(TreeBuilder, tree_builder_factory)
    logger.debug(
        "Registered widget services",
        entity_delegate=entity_delegate is not None,
    )
