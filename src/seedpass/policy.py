import logging
import pathlib
from typing import Annotated, Any

import annotated_types
import pydantic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from ruamel import yaml
from ruamel.yaml.error import YAMLError

from . import util
from .charset import CharacterSet, Charset
from .exc import PolicySyntaxError, PolicyValidationError
from .validator import check_requirements

__all__ = ("CharsetRule", "Policy", "DEFAULT_POLICY", "expand_charset", "load_policy")

logger = logging.getLogger(__name__)
loader = yaml.YAML(typ="safe")


def expand_charset(spec: str) -> str:
    """
    Resolves the compact form of a character set into its characters.

    ``x-y`` expands to every code point from ``x`` to ``y`` inclusive when ``x`` does
    not come after ``y``; otherwise the dash is literal, as is a leading or trailing
    dash. A backslash makes the next character literal. Order and duplicates are
    preserved.

    Example::

        assert expand_charset("a-d0-2") == "abcd012"
        assert expand_charset("@_-#") == "@_-#"
    """
    chars: list[str] = []
    i, n = 0, len(spec)

    while i < n:
        char = spec[i]

        if char == "\\" and i + 1 < n:
            chars.append(spec[i + 1])
            i += 2
            continue

        if (
            i + 2 < n
            and spec[i + 1] == "-"
            and spec[i + 2] != "\\"
            and char <= spec[i + 2]
        ):
            chars.extend(map(chr, range(ord(char), ord(spec[i + 2]) + 1)))
            i += 3
            continue

        chars.append(char)
        i += 1

    return "".join(chars)


class CharsetRule(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True, frozen=True
    )

    charset: str = Field(min_length=1)
    min_chars: Annotated[int, annotated_types.Ge(0)] = 0
    frequency: Annotated[int, annotated_types.Ge(0)] = 1

    def character_set(self) -> CharacterSet:
        return CharacterSet(expand_charset(self.charset))


class Policy(BaseModel):
    """
    A composition policy as read from a YAML document.

    Example::

        minLength: 8
        caseSensitive: false
        excluded: ["*password*"]
        rules:
          - charset: a-z
            minChars: 1
            frequency: 10
          - charset: 0-9
            minChars: 1
            frequency: 5
    """

    model_config = ConfigDict(
        alias_generator=to_camel, extra="forbid", populate_by_name=True, frozen=True
    )

    min_length: Annotated[int, annotated_types.Ge(0)] = 0
    rules: list[CharsetRule] = Field(min_length=1)
    excluded: list[str] = Field(default_factory=list)
    case_sensitive: bool = False

    @pydantic.model_validator(mode="after")
    def has_weight(self) -> "Policy":
        if not any(rule.frequency for rule in self.rules):
            raise ValueError("at least one rule must have a non-zero frequency")
        return self

    def build_charset(self) -> Charset:
        return Charset(
            sets=(rule.character_set() for rule in self.rules),
            min_counts=(rule.min_chars for rule in self.rules),
            frequencies=(rule.frequency for rule in self.rules),
        )

    def check(self, password: str, min_length: int | None = None) -> bool:
        return check_requirements(
            password,
            min_length=self.min_length if min_length is None else min_length,
            rules=tuple((rule.character_set(), rule.min_chars) for rule in self.rules),
            excluded=self.excluded,
            case_sensitive=self.case_sensitive,
        )


DEFAULT_POLICY = Policy(
    rules=[
        CharsetRule(charset="a-z", min_chars=1, frequency=10),
        CharsetRule(charset="A-Z", min_chars=1, frequency=10),
        CharsetRule(charset="0-9", min_chars=1, frequency=5),
        CharsetRule(charset="@_-#~!&", min_chars=0, frequency=1),
    ]
)


def load_policy(fn: pathlib.Path) -> Policy:
    try:
        payload: Any = loader.load(fn.read_bytes())
    except YAMLError as ex:
        raise PolicySyntaxError(
            str(ex), PolicySyntaxError.Context(loc={"filename": fn})
        ) from ex

    try:
        policy = Policy.model_validate(payload)
    except pydantic.ValidationError as ex:
        raise PolicyValidationError(
            str(util.model.convert_errors(ex)),
            PolicyValidationError.Context(loc={"filename": fn}),
        ) from ex

    logger.debug("loaded policy %r from %r", policy, str(fn))
    return policy
