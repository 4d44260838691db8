import pathlib
from dataclasses import dataclass
from typing import Any, NotRequired, TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "PolicyError",
    "PolicySyntaxError",
    "PolicyValidationError",
)


@dataclass(slots=True)
class ApplicationError(Exception):
    class Context(TypedDict): ...

    message: str
    ctx: Context | None = None

    def format_message(self) -> str:
        return self.message.format(ctx=self.ctx or {})

    @override
    def __str__(self) -> str:
        return self.format_message()


@dataclass(slots=True)
class InvalidArgumentError(ApplicationError, ValueError):
    """
    Raised when a charset, a seed or generation bounds are malformed.

    Covers mismatched list lengths and an all-zero frequency table at charset
    construction, as well as a minimum length below the sum of per-set minimums
    (or above the maximum length) at generation time.
    """

    class Context(TypedDict):
        """
        Attributes:
            argument: The name of the offending argument.
            value: The offending value, when it is worth showing.
        """

        argument: str
        value: NotRequired[Any]

    ctx: Context | None = None


@dataclass(slots=True)
class IndexOutOfRangeError(ApplicationError, IndexError):
    """Raised when a charset is indexed past its last character set."""

    class Context(TypedDict):
        index: int
        size: int

    ctx: Context | None = None


class Location(TypedDict):
    filename: pathlib.Path
    line: NotRequired[int]
    col: NotRequired[int]


@dataclass(slots=True)
class PolicyError(ApplicationError): ...


@dataclass(slots=True)
class PolicySyntaxError(PolicyError):
    """
    Raised when there is an issue with parsing a given policy file.
    """

    class Context(TypedDict):
        loc: Location

    ctx: Context | None = None

    @override
    def format_message(self) -> str:
        assert self.ctx is not None
        return "Decoding failed for policy file %r.\n\n%s" % (
            str(self.ctx["loc"]["filename"]),
            self.message,
        )


@dataclass(slots=True)
class PolicyValidationError(PolicyError):
    """
    Raised when there is an issue with validating a given policy file.
    """

    class Context(TypedDict):
        loc: Location

    ctx: Context | None = None

    @override
    def format_message(self) -> str:
        assert self.ctx is not None
        return "Validation failed for policy file %r.\n\n%s" % (
            str(self.ctx["loc"]["filename"]),
            self.message,
        )
