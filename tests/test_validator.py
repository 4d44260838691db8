import string

import pytest

from seedpass import CharacterSet, check_requirements, matches_pattern

LOWER_UPPER_DIGIT = [
    (CharacterSet(string.ascii_lowercase), 1),
    (CharacterSet(string.ascii_uppercase), 1),
    (CharacterSet(string.digits), 1),
]


def test_too_short():
    assert not check_requirements("abcdef", 8, LOWER_UPPER_DIGIT)


def test_meets_every_rule():
    assert check_requirements("abcd3FGH", 8, LOWER_UPPER_DIGIT)


def test_length_only():
    assert check_requirements("abcdefgh", 8)
    assert not check_requirements("abcdefg", 8)
    assert check_requirements("", 0)


@pytest.mark.parametrize(
    "password,expected",
    [
        ("abcdefgh", False),
        ("ABCDEFGH", False),
        ("abcdEFGH", False),
        ("abcdEFG1", True),
        ("1234567A", False),
    ],
)
def test_each_set_is_required(password, expected):
    assert check_requirements(password, 8, LOWER_UPPER_DIGIT) is expected


def test_minimum_counts_above_one():
    rules = [("0123456789", 3)]

    assert not check_requirements("ab12cd", 0, rules)
    assert check_requirements("a1b2c3", 0, rules)


def test_zero_minimum_always_passes():
    assert check_requirements("abc", 0, [("!@#", 0)])


def test_sets_match_with_exact_case_regardless_of_flag():
    rules = [(CharacterSet(string.ascii_uppercase), 1)]

    assert not check_requirements("abcdefgh", 0, rules, case_sensitive=False)
    assert not check_requirements("abcdefgh", 0, rules, case_sensitive=True)


def test_excluded_pattern_case_insensitive():
    assert not check_requirements("XXabYY", 0, excluded=["*ab*"])
    assert not check_requirements("XXABYY", 0, excluded=["*ab*"])


def test_excluded_pattern_case_sensitive():
    assert check_requirements("XXABYY", 0, excluded=["*ab*"], case_sensitive=True)
    assert not check_requirements("XXabYY", 0, excluded=["*ab*"], case_sensitive=True)


def test_excluded_patterns_match_whole_password():
    assert check_requirements("XXabYY", 0, excluded=["ab"])
    assert check_requirements("XXabYY", 0, excluded=["ab*", "*ab"])
    assert not check_requirements("XXabYY", 0, excluded=["ab", "XX*"])


def test_charset_can_be_used_as_rules(charset):
    assert check_requirements("aB3xxxxx", 8, charset)
    assert not check_requirements("aBxxxxxx", 8, charset)


@pytest.mark.parametrize(
    "value,pattern,expected",
    [
        ("", "*", True),
        ("abc", "*", True),
        ("abc", "a*c", True),
        ("ac", "a*c", True),
        ("abc", "a.c", False),
        ("a.c", "a.c", True),
        ("ab", "a?", False),
        ("a?", "a?", True),
        ("a[b]", "a[b]", True),
        ("ab", "a[b]", False),
        ("line\nbreak", "*\n*", True),
        ("Password1", "*password*", True),
    ],
)
def test_matches_pattern(value, pattern, expected):
    assert matches_pattern(value, pattern) is expected


def test_matches_pattern_case_sensitive():
    assert not matches_pattern("Password1", "*password*", case_sensitive=True)
    assert matches_pattern("password1", "*password*", case_sensitive=True)
