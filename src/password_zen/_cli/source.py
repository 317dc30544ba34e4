import logging
import pathlib

from ..exc import InputLocation, InputUnavailableError

__all__ = ("read_passwords",)

logger = logging.getLogger(__name__)


def _unavailable(message: str, fn: pathlib.Path) -> InputUnavailableError:
    return InputUnavailableError(
        message, ctx=InputUnavailableError.Context(loc=InputLocation(filename=fn))
    )


def read_passwords(fn: pathlib.Path) -> list[str]:
    """
    Reads newline-delimited passwords from ``fn``. Surrounding whitespace is trimmed
    and blank lines are skipped.

    Raises:
        InputUnavailableError: If the file does not exist, is a directory, cannot be
            read or decoded, or contains no passwords.
    """
    if not fn.exists():
        raise _unavailable("File does not exist", fn)

    if fn.is_dir():
        raise _unavailable("Path is a directory, not a file", fn)

    try:
        content = fn.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as ex:
        logger.debug(ex, exc_info=ex)
        raise _unavailable("Cannot read file", fn) from ex

    passwords = [line.strip() for line in content.split("\n")]
    passwords = [pwd for pwd in passwords if pwd]

    if not passwords:
        raise _unavailable("No passwords found in file", fn)

    logger.debug("read %d password(s) from %r", len(passwords), str(fn))
    return passwords
