import pydantic
import pytest

from seedpass import DEFAULT_POLICY, CharsetRule, Policy, expand_charset, load_policy
from seedpass.exc import PolicySyntaxError, PolicyValidationError


@pytest.mark.parametrize(
    "spec,expected",
    [
        ("a-d", "abcd"),
        ("a-d0-2", "abcd012"),
        ("A-Z", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"),
        ("@_-#~!&", "@_-#~!&"),
        ("-ab", "-ab"),
        ("ab-", "ab-"),
        ("z-a", "z-a"),
        ("a-a", "a"),
        ("a\\-c", "a-c"),
        ("\\\\", "\\"),
        ("aab", "aab"),
        ("x", "x"),
    ],
)
def test_expand_charset(spec, expected):
    assert expand_charset(spec) == expected


def test_policy_from_camel_case_mapping():
    policy = Policy.model_validate(
        {
            "minLength": 10,
            "caseSensitive": True,
            "excluded": ["*admin*"],
            "rules": [
                {"charset": "a-z", "minChars": 2, "frequency": 3},
                {"charset": "0-9"},
            ],
        }
    )

    assert policy.min_length == 10
    assert policy.case_sensitive is True
    assert policy.rules[0] == CharsetRule(charset="a-z", min_chars=2, frequency=3)
    assert policy.rules[1].min_chars == 0
    assert policy.rules[1].frequency == 1


@pytest.mark.parametrize(
    "payload",
    [
        {"rules": []},
        {"rules": [{"charset": ""}]},
        {"rules": [{"charset": "a-z", "minChars": -1}]},
        {"rules": [{"charset": "a-z", "frequency": 0}]},
        {"rules": [{"charset": "a-z"}], "unknown": 1},
        {"minLength": 8},
    ],
)
def test_policy_rejects_invalid_input(payload):
    with pytest.raises(pydantic.ValidationError):
        Policy.model_validate(payload)


def test_default_policy_charset(charset):
    assert charset.total_frequency == 26
    assert str(charset.set_at(3)) == "@_-#~!&"


def test_policy_check():
    policy = Policy.model_validate(
        {
            "minLength": 8,
            "excluded": ["*abc*"],
            "rules": [
                {"charset": "a-z", "minChars": 1},
                {"charset": "0-9", "minChars": 2},
            ],
        }
    )

    assert policy.check("xyz12xyz")
    assert not policy.check("xyz1xyzw")
    assert not policy.check("xyz12")
    assert policy.check("xyz12", min_length=5)
    assert not policy.check("ABC12xyz")


def test_default_policy_check():
    assert DEFAULT_POLICY.check("abcd3FGH")
    assert not DEFAULT_POLICY.check("abcdefgh")


def test_load_policy(tmp_path):
    fn = tmp_path / "policy.yaml"
    fn.write_text(
        "minLength: 12\n"
        "excluded: ['*admin*']\n"
        "rules:\n"
        "  - charset: a-z\n"
        "    minChars: 4\n"
        "    frequency: 10\n"
        "  - charset: 0-9\n"
        "    minChars: 4\n"
        "    frequency: 2\n"
    )

    policy = load_policy(fn)

    assert policy.min_length == 12
    assert policy.excluded == ["*admin*"]
    assert policy.build_charset().min_total == 8


def test_load_policy_syntax_error(tmp_path):
    fn = tmp_path / "policy.yaml"
    fn.write_text("rules: [\n")

    with pytest.raises(PolicySyntaxError) as ex_info:
        load_policy(fn)

    assert str(ex_info.value).startswith(
        "Decoding failed for policy file %r." % str(fn)
    )


def test_load_policy_validation_error(tmp_path):
    fn = tmp_path / "policy.yaml"
    fn.write_text("rules:\n  - charset: a-z\n    minChars: lots\n")

    with pytest.raises(PolicyValidationError) as ex_info:
        load_policy(fn)

    assert str(ex_info.value).startswith(
        "Validation failed for policy file %r." % str(fn)
    )
