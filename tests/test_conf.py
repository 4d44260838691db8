import pydantic
import pytest

from seedpass import DEFAULT_POLICY
from seedpass._conf import Settings


def test_defaults():
    settings = Settings()

    assert settings.length.min == 8
    assert settings.length.max == 15
    assert settings.policy == DEFAULT_POLICY


def test_init_values():
    settings = Settings(
        length={"min": 12, "max": 20},
        policy={"rules": [{"charset": "a-z", "minChars": 3}]},
    )

    assert (settings.length.min, settings.length.max) == (12, 20)
    assert settings.policy.rules[0].min_chars == 3


def test_environment_overrides_init_values(monkeypatch):
    monkeypatch.setenv("SEEDPASS_LENGTH__MIN", "12")

    settings = Settings(length={"min": 9, "max": 16})

    assert settings.length.min == 12


def test_policy_from_environment(monkeypatch):
    monkeypatch.setenv("SEEDPASS_POLICY", '{"rules": [{"charset": "0-9"}]}')

    assert Settings().policy.rules[0].charset == "0-9"


@pytest.mark.parametrize(
    "payload",
    [
        {"length": {"min": 10, "max": 5}},
        {"length": {"min": 0}},
        {"length": {"avg": 10}},
        {"unknown": True},
    ],
)
def test_invalid_settings(payload):
    with pytest.raises(pydantic.ValidationError):
        Settings(**payload)
