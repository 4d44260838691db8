import pathlib
from enum import StrEnum
from logging import getLogger
from typing import Iterator, Optional, Sequence

import click
from rich.console import Console
from rich.text import Text

from ... import _conf
from ...policy import load_policy
from ..exc import CLIError, handle_exception

__all__ = ["check"]

logger = getLogger(__name__)


class ResultStyle(StrEnum):
    OK = "green"
    FAIL = "yellow"


def stream_passwords(passwords: Sequence[str]) -> Iterator[str]:
    if passwords:
        yield from passwords
        return

    for line in click.get_text_stream("stdin"):
        if password := line.rstrip("\r\n"):
            yield password


@click.command()
@click.argument("passwords", nargs=-1)
@click.option(
    "--min-length",
    type=click.IntRange(min=0),
    help="Minimum password length. Defaults to the policy's minimum length.",
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
def check(
    ctx: click.Context,
    passwords: Sequence[str],
    min_length: Optional[int],
    policy_file: Optional[pathlib.Path],
) -> None:
    """
    Check passwords against the configured policy.

    Reads passwords from the arguments, or from standard input one per line. Exits
    with status 1 if any password does not meet the policy.

    Examples:

    \b
      $ seedpass check 'abcd3FGH'
    \b
      $ seedpass generate -f users.txt | seedpass check
    """
    if not (settings := ctx.find_object(_conf.Settings)):
        raise RuntimeError("Configuration not found")

    console = Console(highlight=False, soft_wrap=True)
    failed = 0

    try:
        policy = load_policy(policy_file) if policy_file else settings.policy

        for password in stream_passwords(passwords):
            if policy.check(password, min_length=min_length):
                console.print(Text.assemble(("ok", ResultStyle.OK), "   ", password))
            else:
                console.print(Text.assemble(("fail", ResultStyle.FAIL), " ", password))
                failed += 1
    except Exception as ex:
        handle_exception(ex)

    logger.debug("checked passwords, %d failed", failed)

    if failed:
        raise CLIError("%d password(s) do not meet the policy." % failed)
