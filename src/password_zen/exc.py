import pathlib
from dataclasses import dataclass
from typing import NotRequired, TypedDict

from typing_extensions import override

__all__ = (
    "ApplicationError",
    "GenerationError",
    "InvalidParametersError",
    "InvalidLengthError",
    "EmptyCharsetError",
    "RandomSourceError",
    "InputUnavailableError",
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
class GenerationError(ApplicationError): ...


@dataclass(slots=True)
class InvalidParametersError(GenerationError):
    """
    Raised when the generator is called with a length or charset it cannot work
    with.
    """


@dataclass(slots=True, kw_only=True)
class InvalidLengthError(InvalidParametersError):
    class Context(TypedDict):
        length: int
        max_length: int

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Invalid password length %d: %s (allowed range is 1-%d)" % (
            self.ctx["length"],
            self.message,
            self.ctx["max_length"],
        )


@dataclass(slots=True)
class EmptyCharsetError(InvalidParametersError):
    message: str = "No valid characters available for password generation"


@dataclass(slots=True)
class RandomSourceError(GenerationError):
    """
    Raised when the operating system's entropy source fails to supply random bytes.

    The failure is reported as is; generation is never retried with a weaker source.
    """

    class Context(TypedDict):
        reason: str

    ctx: Context | None = None


class InputLocation(TypedDict):
    filename: NotRequired[pathlib.Path]


@dataclass(slots=True)
class InputUnavailableError(ApplicationError):
    """
    Raised when there is nothing to analyze: no password and no file were given, or
    the file is missing, unreadable, a directory or holds no passwords.
    """

    class Context(TypedDict):
        loc: InputLocation

    ctx: Context | None = None

    @override
    def format_message(self) -> str:
        if self.ctx and (filename := self.ctx["loc"].get("filename")):
            return "%s: %s" % (self.message, str(filename))
        return self.message
