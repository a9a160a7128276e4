"""Top-level pytest configuration for typed widget."""

import pytest

# Imported for their side effects so error codes are registered
import typed_widget.definitions.errors
import typed_widget.di.errors
import typed_widget.widgets.errors

from typed_widget.definitions import (
    ComplexDefinition,
    DefinitionRegistry,
    EntityReferenceDefinition,
    FieldDefinition,
    ListDefinition,
    primitive,
)
from typed_widget.widgets import BuilderSettings, TreeBuilder

BUILDER_ENV_KEYS = [
    "TYPED_WIDGET_BUILDER_INCLUDE_NON_REQUIRED",
    "TYPED_WIDGET_BUILDER_INCLUDE_READ_ONLY",
    "TYPED_WIDGET_BUILDER_MAX_DEPTH",
]


@pytest.fixture(autouse=True)
def clear_builder_env(monkeypatch):
    for key in BUILDER_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def contact_definition():
    return ComplexDefinition(
        label="Contact",
        description="Who to reach",
        properties={
            "name": primitive("string", label="Name", required=True),
            "nickname": primitive("string", label="Nickname"),
        },
    )


@pytest.fixture
def article_entity():
    return EntityReferenceDefinition(
        label="Article",
        entity_type_id="node",
        instantiation_values={"type": "article"},
        properties={
            "title": primitive("string", label="Title", required=True),
            "promote": primitive("boolean", label="Promoted"),
            "nid": primitive("integer", label="ID", read_only=True),
        },
    )


@pytest.fixture
def registry(contact_definition, article_entity):
    registry = DefinitionRegistry()
    registry.register("contact", contact_definition)
    registry.register(
        "flags",
        ListDefinition(label="Flags", item_definition=primitive("boolean")),
    )
    registry.register("entity:node", article_entity)
    registry.register(
        "field_item:author",
        FieldDefinition(
            label="Author",
            item_definition=primitive("integer", label="Target ID"),
            settings={"target_type": "user"},
        ),
    )
    registry.register(
        "field_item:telephone",
        FieldDefinition(
            label="Telephone",
            item_definition=ComplexDefinition(
                properties={
                    "value": primitive("string", label="Number", required=True),
                    "extension": primitive("string", label="Extension"),
                }
            ),
        ),
    )
    return registry


@pytest.fixture
def builder(registry):
    return TreeBuilder(registry, settings=BuilderSettings())
