import pytest
from pydantic import TypeAdapter, ValidationError

from typed_widget.definitions import (
    Capability,
    ComplexDefinition,
    DefinitionNotFoundError,
    DefinitionRegistry,
    DefinitionResolverProtocol,
    DuplicateDefinitionError,
    EntityReferenceDefinition,
    FieldDefinition,
    ListDefinition,
    PrimitiveDefinition,
    TypedData,
    TypeDefinition,
    primitive,
    property_definitions,
)


def test_primitive_gets_catalogue_capabilities():
    timestamp = primitive("timestamp", label="Created")
    assert timestamp.capabilities == {Capability.DATETIME, Capability.INTEGER}
    assert timestamp.has_capability("DateTime")
    assert primitive("string").capabilities == frozenset()


def test_primitive_merges_extra_capabilities():
    money = primitive("string", capabilities=["Float"])
    assert money.has_capability(Capability.FLOAT)


def test_definitions_are_immutable():
    definition = primitive("string", label="Name")
    with pytest.raises(ValidationError):
        definition.label = "Other"


def test_type_definition_discriminates_on_type():
    adapter = TypeAdapter(TypeDefinition)
    definition = adapter.validate_python(
        {
            "type": "complex",
            "label": "Address",
            "properties": {
                "street": {"type": "primitive", "data_type": "string"},
                "lines": {
                    "type": "list",
                    "item_definition": {"type": "primitive", "data_type": "string"},
                },
            },
        }
    )
    assert isinstance(definition, ComplexDefinition)
    assert isinstance(definition.properties["street"], PrimitiveDefinition)
    assert isinstance(definition.properties["lines"], ListDefinition)


def test_constraints_keep_declared_order():
    definition = primitive(
        "string", constraints={"Length": {"max": 5}, "Choice": {"choices": {"a": "A"}}}
    )
    assert list(definition.constraints) == ["Length", "Choice"]
    assert definition.get_constraint("Length") == {"max": 5}
    assert definition.get_constraint("Range") is None


def test_field_target_type():
    reference = FieldDefinition(
        item_definition=primitive("integer"), settings={"target_type": "user"}
    )
    assert reference.target_type == "user"
    assert FieldDefinition(item_definition=primitive("string")).target_type is None


def test_property_definitions(contact_definition, article_entity):
    assert list(property_definitions(contact_definition)) == ["name", "nickname"]
    assert list(property_definitions(article_entity)) == ["title", "promote", "nid"]
    wrapped = FieldDefinition(item_definition=contact_definition)
    assert property_definitions(wrapped) == contact_definition.properties
    listed = ListDefinition(item_definition=contact_definition)
    assert property_definitions(listed) == contact_definition.properties
    assert property_definitions(primitive("string")) is None


def test_typed_data_carries_definition():
    value = TypedData(definition=primitive("boolean"), value=True)
    assert value.definition.data_type == "boolean"


class TestDefinitionRegistry:
    def test_is_a_resolver(self):
        assert isinstance(DefinitionRegistry(), DefinitionResolverProtocol)

    def test_register_and_resolve(self, contact_definition):
        registry = DefinitionRegistry()
        registry.register("contact", contact_definition)
        assert registry.resolve("contact") is contact_definition
        assert registry.has("contact")
        assert registry.list_ids() == ["contact"]

    def test_resolves_standard_primitives(self):
        registry = DefinitionRegistry()
        integer = registry.resolve("integer")
        assert integer.data_type == "integer"
        assert integer.has_capability(Capability.INTEGER)

    def test_unknown_identifier(self):
        registry = DefinitionRegistry()
        with pytest.raises(DefinitionNotFoundError) as exc_info:
            registry.resolve("entity:missing")
        assert exc_info.value.definition_id == "entity:missing"
        assert exc_info.value.code == "DEFINITION_NOT_FOUND"

    def test_without_standard_primitives(self):
        registry = DefinitionRegistry(include_standard_primitives=False)
        assert not registry.has("string")
        with pytest.raises(DefinitionNotFoundError):
            registry.resolve("string")

    def test_duplicate_registration(self, contact_definition):
        registry = DefinitionRegistry()
        registry.register("contact", contact_definition)
        with pytest.raises(DuplicateDefinitionError):
            registry.register("contact", contact_definition)
        replacement = ComplexDefinition(label="Replacement")
        registry.register("contact", replacement, replace=True)
        assert registry.resolve("contact") is replacement

    def test_register_primitive_type(self):
        registry = DefinitionRegistry()
        registry.register_primitive_type("money", ["Float"])
        money = registry.resolve("money")
        assert money.capabilities == {Capability.FLOAT}
        assert registry.create_primitive("money", label="Price").label == "Price"

    def test_registered_definition_wins_over_catalogue(self):
        registry = DefinitionRegistry()
        custom = primitive("string", label="Custom")
        registry.register("string", custom)
        assert registry.resolve("string") is custom

    def test_entity_definition(self, article_entity):
        registry = DefinitionRegistry()
        registry.register("entity:node", article_entity)
        resolved = registry.resolve("entity:node")
        assert isinstance(resolved, EntityReferenceDefinition)
        assert resolved.instantiation_values == {"type": "article"}


def test_unknown_fields_are_rejected():
    with pytest.raises(ValidationError):
        primitive("string", colour="red")
