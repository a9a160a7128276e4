import pytest

from typed_widget.definitions import DefinitionResolverProtocol
from typed_widget.di import Container
from typed_widget.widgets import (
    BuilderSettings,
    EntityFormDelegateProtocol,
    TreeBuilder,
    WidgetSpec,
    WidgetTypeSelector,
    register_widget_services,
)


class FakeFormDelegate:
    def build_default_form(self, entity_type_id, initial_values):
        return WidgetSpec(kind="container", children={"label": WidgetSpec(kind="textfield")})


@pytest.mark.asyncio
async def test_register_widget_services(registry):
    settings = BuilderSettings(include_read_only=True)
    container = await Container.create(
        lambda c: register_widget_services(c, registry, settings=settings)
    )
    builder = await container.resolve(TreeBuilder)
    assert builder is await container.resolve(TreeBuilder)
    assert builder.resolver is registry
    assert builder.settings is settings
    assert builder.policy.include_read_only is True
    assert await container.resolve(DefinitionResolverProtocol) is registry
    assert await container.resolve_optional(EntityFormDelegateProtocol) is None
    assert builder.build_from_id("contact").kind == "fieldset"


@pytest.mark.asyncio
async def test_register_with_delegate_and_hook(registry):
    container = Container()
    await register_widget_services(
        container,
        registry,
        entity_delegate=FakeFormDelegate(),
        alter_hook=lambda kind, definition: "textarea",
        settings=BuilderSettings(),
    )
    builder = await container.resolve(TreeBuilder)
    selector = await container.resolve(WidgetTypeSelector)
    assert builder.selector is selector
    assert list(builder.build_from_id("entity:node").children) == ["label"]
    assert builder.build_from_id("string").kind == "textarea"
