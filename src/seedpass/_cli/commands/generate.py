import logging
import pathlib
from typing import IO, Iterator, Optional, Sequence

import click
from rich.console import Console
from rich.measure import Measurement
from rich.table import Column, Table
from rich.text import Text

from ... import _conf
from ...generator import generate as generate_password
from ...policy import load_policy
from ...stream import IntegerSeed, Seed, SeededStream, TextSeed
from ..exc import CLIError, handle_exception

__all__ = ["generate"]

logger = logging.getLogger(__name__)

UNBOUNDED_WIDTH = 1 << 16


def parse_seed(value: str, as_int: bool) -> Seed:
    if not as_int:
        return TextSeed(value)

    try:
        number = int(value, 0)
    except ValueError as ex:
        raise CLIError(
            "Seed %r is not an unsigned integer. Use a decimal number or a 0x, 0o or "
            "0b prefixed one." % value,
            exit_code=2,
        ) from ex

    if number < 0:
        raise CLIError("Seed %r must not be negative." % value, exit_code=2)

    return IntegerSeed(number)


def stream_seeds(seeds: Sequence[str], seed_file: Optional[IO[str]]) -> Iterator[str]:
    """Yields seeds given on the command line, then those read from `seed_file`, one
    per line. Falls back to standard input when neither is given."""
    yield from seeds

    if seed_file is None and seeds:
        return

    for line in seed_file or click.get_text_stream("stdin"):
        if seed := line.rstrip("\r\n"):
            yield seed


def print_unwrapped(table: Table) -> None:
    """Prints `table` no narrower than its widest row, so passwords are never
    truncated when the terminal (or the 80 column default for pipes) is narrower."""
    console = Console()
    width = Measurement.get(
        console, console.options.update_width(UNBOUNDED_WIDTH), table
    ).maximum
    if width > console.width:
        console = Console(width=width)
    console.print(table)


@click.command()
@click.argument("seeds", nargs=-1)
@click.option(
    "-f",
    "--filename",
    "seed_file",
    type=click.File("r"),
    help="Read seeds from a file, one per line. Use '-' for standard input.",
)
@click.option(
    "--min-length",
    type=click.IntRange(min=1),
    help="Minimum password length. Defaults to the configured length range.",
)
@click.option(
    "--max-length",
    type=click.IntRange(min=1),
    help="Maximum password length. Defaults to the configured length range.",
)
@click.option(
    "--int",
    "as_int",
    is_flag=True,
    default=False,
    help="Treat every seed as an unsigned integer (0x, 0o and 0b prefixes allowed).",
)
@click.option(
    "--check/--no-check",
    default=False,
    help="Validate every password against the policy and fail if any does not pass.",
)
@click.option(
    "--table",
    is_flag=True,
    default=False,
    help="Print a table of seeds and passwords instead of bare passwords.",
)
@click.option(
    "-p",
    "--policy",
    "policy_file",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML policy file. Overrides the configured policy.",
)
@click.pass_context
def generate(
    ctx: click.Context,
    seeds: Sequence[str],
    seed_file: Optional[IO[str]],
    min_length: Optional[int],
    max_length: Optional[int],
    as_int: bool,
    check: bool,
    table: bool,
    policy_file: Optional[pathlib.Path],
) -> None:
    """
    Derive a password from each seed.

    The same seed, policy and length range always yield the same password, so
    nothing needs to be stored.

    Examples:

    \b
      # Derive a password for a single user
      $ seedpass generate alice
    \b
      # Derive passwords for many users at once
      $ seedpass generate -f users.txt --min-length 12 --max-length 16
    \b
      # Use integer seeds
      $ seedpass generate --int 0x45 1234
    """
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")

    min_length = settings.length.min if min_length is None else min_length
    max_length = settings.length.max if max_length is None else max_length

    result = (
        Table(Column("Seed", no_wrap=True), Column("Password", no_wrap=True))
        if table
        else None
    )
    failed = 0

    try:
        policy = load_policy(policy_file) if policy_file else settings.policy
        charset = policy.build_charset()
        stream = SeededStream()

        for raw in stream_seeds(seeds, seed_file):
            password = generate_password(
                charset,
                parse_seed(raw, as_int),
                min_length,
                max_length,
                stream=stream,
            )

            if check and not policy.check(password):
                logger.debug("password for seed %r does not meet the policy", raw)
                click.echo(
                    "Password for seed %r does not meet the policy" % raw, err=True
                )
                failed += 1

            if result is not None:
                result.add_row(Text(raw), Text(password))
            else:
                click.echo(password)
    except Exception as ex:
        handle_exception(ex)

    if result is not None:
        print_unwrapped(result)

    if failed:
        raise CLIError("%d password(s) do not meet the policy." % failed)
