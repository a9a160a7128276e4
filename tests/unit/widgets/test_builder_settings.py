import pytest
from pydantic import ValidationError

from typed_widget.widgets import BuilderSettings, InclusionPolicy


def test_defaults():
    settings = BuilderSettings.load()
    assert settings.include_non_required is True
    assert settings.include_read_only is False
    assert settings.max_depth == 32
    assert settings.to_policy() == InclusionPolicy()


@pytest.mark.parametrize(
    "env,field,expected",
    [
        ({"INCLUDE_NON_REQUIRED": "false"}, "include_non_required", False),
        ({"INCLUDE_READ_ONLY": "true"}, "include_read_only", True),
        ({"MAX_DEPTH": "8"}, "max_depth", 8),
    ],
)
def test_settings_from_env(monkeypatch, env, field, expected):
    for k, v in env.items():
        monkeypatch.setenv(f"TYPED_WIDGET_BUILDER_{k}", v)
    assert getattr(BuilderSettings.load(), field) == expected


def test_max_depth_must_be_positive():
    with pytest.raises(ValidationError):
        BuilderSettings(max_depth=0)


def test_settings_are_frozen():
    settings = BuilderSettings()
    with pytest.raises(ValidationError):
        settings.max_depth = 4


def test_to_policy():
    policy = BuilderSettings(include_read_only=True).to_policy()
    assert policy == InclusionPolicy(include_non_required=True, include_read_only=True)
