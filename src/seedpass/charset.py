import bisect
import itertools
import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload

from typing_extensions import override

from .exc import IndexOutOfRangeError, InvalidArgumentError

__all__ = ("CharacterSet", "Charset")

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CharacterSet(Sequence[str]):
    """
    An immutable, ordered collection of characters forming one category.

    Characters are kept in the order given and are not deduplicated, so a
    character that occurs twice is twice as likely to be drawn from this set.

    Example::

        digits = CharacterSet("0123456789")
        assert digits[3] == "3"
    """

    chars: tuple[str, ...]

    def __init__(self, chars: Iterable[str]) -> None:
        chars = tuple(chars)
        if not chars:
            raise InvalidArgumentError(
                "Character set must contain at least one character",
                InvalidArgumentError.Context(argument="chars"),
            )
        if any(len(ch) != 1 for ch in chars):
            raise InvalidArgumentError(
                "Character set members must be single characters, got "
                "{ctx[value]!r}",
                InvalidArgumentError.Context(argument="chars", value=chars),
            )
        object.__setattr__(self, "chars", chars)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[str, ...]: ...

    @override
    def __getitem__(self, index: int | slice) -> str | tuple[str, ...]:
        return self.chars[index]

    @override
    def __len__(self) -> int:
        return len(self.chars)

    @override
    def __iter__(self) -> Iterator[str]:
        return iter(self.chars)

    @override
    def __contains__(self, value: object) -> bool:
        return value in self.chars

    @override
    def __str__(self) -> str:
        return "".join(self.chars)


@dataclass(slots=True, frozen=True)
class Charset:
    """
    Aggregates character sets with their minimum counts and frequency weights.

    The cumulative frequency table is computed once at construction; entry ``i``
    holds the sum of ``frequencies[0..i]``. A value ``x`` drawn uniformly from
    ``[0, total_frequency)`` falls into the range of exactly one set, so sets with
    a larger weight are picked proportionally more often.

    Raises:
        InvalidArgumentError: When the three sequences differ in length, are
            empty, contain negative numbers, or when every frequency is zero.
    """

    sets: tuple[CharacterSet, ...]
    min_counts: tuple[int, ...]
    frequencies: tuple[int, ...]
    _cumulative: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __init__(
        self,
        sets: Iterable[CharacterSet | Iterable[str]],
        min_counts: Iterable[int],
        frequencies: Iterable[int],
    ) -> None:
        sets_ = tuple(
            s if isinstance(s, CharacterSet) else CharacterSet(s) for s in sets
        )
        min_counts_, frequencies_ = tuple(min_counts), tuple(frequencies)

        if not (len(sets_) == len(min_counts_) == len(frequencies_)):
            raise InvalidArgumentError(
                "Sets, minimum counts and frequencies must have equal lengths, got "
                "%d, %d and %d" % (len(sets_), len(min_counts_), len(frequencies_)),
                InvalidArgumentError.Context(argument="sets"),
            )
        if not sets_:
            raise InvalidArgumentError(
                "Charset must contain at least one character set",
                InvalidArgumentError.Context(argument="sets"),
            )
        if any(n < 0 for n in min_counts_):
            raise InvalidArgumentError(
                "Minimum counts must be non-negative, got {ctx[value]!r}",
                InvalidArgumentError.Context(argument="min_counts", value=min_counts_),
            )
        if any(n < 0 for n in frequencies_):
            raise InvalidArgumentError(
                "Frequencies must be non-negative, got {ctx[value]!r}",
                InvalidArgumentError.Context(
                    argument="frequencies", value=frequencies_
                ),
            )

        cumulative = tuple(itertools.accumulate(frequencies_))
        if cumulative[-1] == 0:
            raise InvalidArgumentError(
                "Sum of frequencies must be at least 1",
                InvalidArgumentError.Context(argument="frequencies"),
            )

        object.__setattr__(self, "sets", sets_)
        object.__setattr__(self, "min_counts", min_counts_)
        object.__setattr__(self, "frequencies", frequencies_)
        object.__setattr__(self, "_cumulative", cumulative)

        logger.debug(
            "built charset of %d set(s), cumulative frequencies %r",
            len(sets_),
            cumulative,
        )

    def __len__(self) -> int:
        return len(self.sets)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.sets):
            raise IndexOutOfRangeError(
                "Character set index {ctx[index]} is out of range for a charset of "
                "{ctx[size]} set(s)",
                IndexOutOfRangeError.Context(index=index, size=len(self.sets)),
            )

    def set_at(self, index: int) -> CharacterSet:
        self._check_index(index)
        return self.sets[index]

    def min_count_at(self, index: int) -> int:
        self._check_index(index)
        return self.min_counts[index]

    @property
    def total_frequency(self) -> int:
        """Exclusive upper bound for weighted sampling."""
        return self._cumulative[-1]

    @property
    def min_total(self) -> int:
        """Sum of per-set minimum counts."""
        return sum(self.min_counts)

    def set_index_for_frequency(self, value: int) -> int:
        """
        Returns the smallest index ``i`` such that ``value < cumulative[i]``.

        Values outside ``[0, total_frequency)`` resolve to index 0.
        """
        if value < 0:
            return 0
        index = bisect.bisect_right(self._cumulative, value)
        return index if index < len(self._cumulative) else 0

    def rules(self) -> tuple[tuple[CharacterSet, int], ...]:
        """Returns the ``(set, minimum count)`` pairs used for validation."""
        return tuple(zip(self.sets, self.min_counts))
