import logging
from dataclasses import dataclass
from typing import NoReturn, TypedDict

import click
from typing_extensions import override

from .. import exc
from ..exc import Location

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Signals that an error has occurred in the application.

    Provides an `exit_code` attribute for specifying a specific exit code, and a
    `message` attribute containing a human-readable description of the error.

    Exit codes in use: 1 for policy and configuration failures, 2 for invalid
    arguments and 128 for unexpected errors.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True)
class ConfigError(CLIError):
    pass


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(ConfigError):
    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Decoding failed for configuration file %r.\n\n%s" % (
            str(self.ctx["loc"]["filename"]),
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(ConfigError):
    @override
    def format_message(self) -> str:
        return "Invalid configuration input.\n\n%s" % self.message


def handle_exception(ex: Exception) -> NoReturn:
    """Translates an exception raised while running a command into a `CLIError`."""
    if isinstance(ex, CLIError):
        raise ex

    if isinstance(ex, exc.InvalidArgumentError):
        raise CLIError("Invalid argument: %s" % ex, exit_code=2) from ex

    if isinstance(ex, exc.ApplicationError):
        raise CLIError(str(ex)) from ex

    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex, exit_code=128) from ex
