import functools
import logging
import re
from collections.abc import Iterable

from .charset import CharacterSet, Charset

__all__ = ("check_requirements", "matches_pattern")

logger = logging.getLogger(__name__)

Rule = tuple[CharacterSet | str, int]


@functools.lru_cache(maxsize=256)
def _compile(pattern: str, case_sensitive: bool) -> re.Pattern[str]:
    # Only "*" is a metacharacter; everything else is literal.
    return re.compile(
        ".*".join(re.escape(part) for part in pattern.split("*")),
        re.DOTALL if case_sensitive else re.DOTALL | re.IGNORECASE,
    )


def matches_pattern(value: str, pattern: str, case_sensitive: bool = False) -> bool:
    """
    Matches ``value`` as a whole against a wildcard ``pattern``.

    ``*`` stands for any run of characters, including an empty one.

    Example::

        assert matches_pattern("XXabYY", "*AB*")
        assert not matches_pattern("XXabYY", "*AB*", case_sensitive=True)
    """
    return _compile(pattern, case_sensitive).fullmatch(value) is not None


def _count_reaches(password: str, chars: CharacterSet | str, minimum: int) -> bool:
    members = frozenset(chars)
    count = 0
    for char in password:
        if char in members:
            count += 1
            if count >= minimum:
                return True
    return False


def check_requirements(
    password: str,
    min_length: int,
    rules: Charset | Iterable[Rule] = (),
    excluded: Iterable[str] = (),
    case_sensitive: bool = False,
) -> bool:
    """
    Tells whether ``password`` satisfies a composition policy.

    The checks run in order and stop at the first failure: overall length, then
    the per-set minimum counts (always matched with exact case), then the excluded
    wildcard patterns. ``case_sensitive`` only affects the excluded patterns.

    Args:
        password: The candidate password.
        min_length: Minimum overall length.
        rules: ``(character set, minimum count)`` pairs, or a charset whose
            frequencies are ignored.
        excluded: Wildcard patterns the whole password must not match.
        case_sensitive: Whether excluded patterns compare with exact case.
    """
    if len(password) < min_length:
        logger.debug("password is shorter than %d character(s)", min_length)
        return False

    if isinstance(rules, Charset):
        rules = rules.rules()

    for chars, minimum in rules:
        if minimum <= 0:
            continue
        if not _count_reaches(password, chars, minimum):
            logger.debug("password has fewer than %d of %r", minimum, str(chars))
            return False

    for pattern in excluded:
        if matches_pattern(password, pattern, case_sensitive):
            logger.debug("password matches excluded pattern %r", pattern)
            return False

    return True
