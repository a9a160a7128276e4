import pytest

from typed_widget.definitions import primitive
from typed_widget.widgets import DURATION_MAX_SECONDS, WidgetKind, WidgetTypeSelector


@pytest.fixture
def selector():
    return WidgetTypeSelector()


@pytest.mark.parametrize(
    "constraints",
    [
        {},
        {"Choice": {"choices": {"y": "Yes", "n": "No"}}},
        {"Range": {"min": 0, "max": 1}},
    ],
)
def test_boolean_is_always_checkbox(selector, constraints):
    definition = primitive("boolean", constraints=constraints)
    assert selector.build(definition).kind == "checkbox"


@pytest.mark.parametrize(
    "data_type,kind",
    [
        ("string", WidgetKind.TEXTFIELD),
        ("email", WidgetKind.TEXTFIELD),
        ("integer", WidgetKind.NUMBER),
        ("float", WidgetKind.NUMBER),
        ("datetime_iso8601", WidgetKind.DATETIME),
        # DateTime is checked before Integer
        ("timestamp", WidgetKind.DATETIME),
        ("timespan", WidgetKind.NUMBER),
        ("duration_iso8601", WidgetKind.TEXTFIELD),
    ],
)
def test_kind_from_capabilities(selector, data_type, kind):
    assert selector.select_kind(primitive(data_type)) == kind


def test_number_with_range(selector):
    definition = primitive("integer", constraints={"Range": {"min": 0, "max": 10}})
    spec = selector.build(definition)
    assert spec.kind == "number"
    assert spec.min == 0
    assert spec.max == 10


def test_number_with_partial_range(selector):
    spec = selector.build(primitive("float", constraints={"Range": {"min": 1.5}}))
    assert spec.min == 1.5
    assert spec.max is None


def test_duration_without_range_is_bounded_to_a_day(selector):
    # Duration bounds need an Integer or Float tag too; timespan carries Integer.
    spec = selector.build(primitive("timespan"))
    assert spec.to_dict() == {
        "kind": "number",
        "title": "",
        "description": "",
        "min": 0,
        "max": DURATION_MAX_SECONDS,
    }
    assert DURATION_MAX_SECONDS == 86400


def test_range_wins_over_duration_default(selector):
    spec = selector.build(
        primitive("timespan", constraints={"Range": {"min": 60, "max": 3600}})
    )
    assert (spec.min, spec.max) == (60, 3600)


def test_plain_number_has_no_bounds(selector):
    spec = selector.build(primitive("integer"))
    assert spec.min is None
    assert spec.max is None


def test_select_from_choice_constraint(selector):
    definition = primitive(
        "string", constraints={"AllowedValues": {"choices": {"a": "Apple", "b": "Banana"}}}
    )
    spec = selector.build(definition)
    assert spec.kind == "select"
    assert spec.options == {"a": "Apple", "b": "Banana"}


def test_last_choice_constraint_wins(selector):
    definition = primitive(
        "string",
        constraints={
            "Choice": {"choices": {"x": "X"}},
            "AllowedValues": {"choices": {"y": "Y"}},
        },
    )
    assert selector.build(definition).options == {"y": "Y"}


def test_empty_choices_are_ignored(selector):
    definition = primitive(
        "string",
        constraints={
            "Choice": {"choices": {"x": "X"}},
            "AllowedValues": {"choices": {}},
        },
    )
    assert selector.build(definition).options == {"x": "X"}
    assert selector.select_kind(primitive("string", constraints={"Choice": {}})) == (
        "textfield"
    )


def test_choice_list_becomes_options(selector):
    definition = primitive("string", constraints={"Choice": {"choices": ["red", "blue"]}})
    assert selector.build(definition).options == {"red": "red", "blue": "blue"}


def test_numbers_ignore_choices(selector):
    definition = primitive("integer", constraints={"Choice": {"choices": {1: "One"}}})
    spec = selector.build(definition)
    assert spec.kind == "number"
    assert spec.options is None


def test_required_and_disabled_flags(selector):
    spec = selector.build(
        primitive("string", label="Code", required=True, read_only=True)
    )
    assert spec.required is True
    assert spec.disabled is True
    assert spec.title == "Code"


def test_flags_absent_when_false(selector):
    data = selector.build(primitive("string")).to_dict()
    assert "required" not in data
    assert "disabled" not in data


def test_alteration_hook_overrides_kind():
    def hook(kind, definition):
        if definition.constraints.get("Choice"):
            return WidgetKind.SELECT
        return kind

    selector = WidgetTypeSelector(alter_hook=hook)
    definition = primitive("integer", constraints={"Choice": {"choices": {1: "One"}}})
    spec = selector.build(definition)
    assert spec.kind == "select"
    assert spec.options == {1: "One"}
    assert spec.min is None
    assert selector.build(primitive("integer")).kind == "number"


def test_alteration_hook_sees_selected_kind():
    seen = []

    def hook(kind, definition):
        seen.append((kind, definition.data_type))
        return kind

    WidgetTypeSelector(hook).build(primitive("integer"))
    assert seen == [("number", "integer")]


def test_selection_result(selector):
    selection = selector.select(primitive("timespan", required=True))
    assert selection.kind == "number"
    assert selection.properties == {"min": 0, "max": 86400, "required": True}
