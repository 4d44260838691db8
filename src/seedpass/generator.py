import logging

from .charset import Charset
from .exc import InvalidArgumentError
from .stream import SeededStream, SeedLike

__all__ = ("generate",)

logger = logging.getLogger(__name__)


def generate(
    charset: Charset,
    seed: SeedLike,
    min_length: int,
    max_length: int,
    *,
    stream: SeededStream | None = None,
) -> str:
    """
    Derives a password from ``seed`` that satisfies every per-set minimum.

    The same charset, seed and bounds always produce the same password. The draw
    order is fixed: target length first, then the mandatory characters of each set
    in declaration order, then one weighted pick per remaining position. Mandatory
    characters are therefore always at the front of the password.

    Args:
        charset: Character sets with their minimum counts and frequency weights.
        seed: An unsigned integer or a text seed.
        min_length: Inclusive lower bound of the password length.
        max_length: Inclusive upper bound of the password length.
        stream: The stream to draw from. It is re-seeded before use; a fresh one is
            created when omitted.

    Raises:
        InvalidArgumentError: When ``min_length`` exceeds ``max_length`` or is less
            than the sum of the charset's minimum counts.
    """
    if min_length > max_length:
        raise InvalidArgumentError(
            "Minimum password length %d is greater than maximum password length %d"
            % (min_length, max_length),
            InvalidArgumentError.Context(argument="min_length"),
        )
    if min_length < charset.min_total:
        raise InvalidArgumentError(
            "Minimum password length %d is less than the sum of per-set minimums %d"
            % (min_length, charset.min_total),
            InvalidArgumentError.Context(argument="min_length"),
        )

    if stream is None:
        stream = SeededStream()
    stream.reseed(seed)

    length = stream.next_in_range(min_length, max_length + 1)
    logger.debug("generating password of length %d", length)

    buf: list[str] = []

    for index in range(len(charset)):
        chars = charset.set_at(index)
        for _ in range(charset.min_count_at(index)):
            buf.append(stream.next_from_sequence(chars))

    while len(buf) < length:
        index = charset.set_index_for_frequency(
            stream.next_in_range(0, charset.total_frequency)
        )
        buf.append(stream.next_from_sequence(charset.set_at(index)))

    return "".join(buf)
