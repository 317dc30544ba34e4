import logging
import secrets

from .charset import Charset
from .exc import (
    EmptyCharsetError,
    InvalidLengthError,
    InvalidParametersError,
    RandomSourceError,
)

__all__ = ("MAX_LENGTH", "generate", "generate_many")

logger = logging.getLogger(__name__)

MAX_LENGTH = 128


def generate(length: int, charset: Charset) -> str:
    """
    Draws a random string of exactly ``length`` characters from ``charset``.

    Every character is picked independently with :func:`secrets.randbelow`, which
    rejection-samples the operating system's CSPRNG, so each member of ``charset``
    is equally likely at every position.

    Raises:
        InvalidLengthError: If ``length`` is not within 1 and :data:`MAX_LENGTH`.
        EmptyCharsetError: If ``charset`` is empty.
        RandomSourceError: If the entropy source cannot supply random bytes.
    """
    if length <= 0:
        raise InvalidLengthError(
            "must be greater than 0",
            ctx=InvalidLengthError.Context(length=length, max_length=MAX_LENGTH),
        )
    if length > MAX_LENGTH:
        raise InvalidLengthError(
            "must not exceed %d characters" % MAX_LENGTH,
            ctx=InvalidLengthError.Context(length=length, max_length=MAX_LENGTH),
        )
    if not charset:
        raise EmptyCharsetError()

    size = len(charset)

    try:
        password = "".join(charset[secrets.randbelow(size)] for _ in range(length))
    except OSError as ex:
        raise RandomSourceError(
            "Error generating random index: {ctx[reason]}",
            ctx=RandomSourceError.Context(reason=str(ex)),
        ) from ex

    logger.debug(
        "generated a %d character password from a pool of %d", length, size
    )
    return password


def generate_many(count: int, length: int, charset: Charset) -> list[str]:
    if count <= 0:
        raise InvalidParametersError(
            "Password count must be greater than 0, got %d" % count
        )
    return [generate(length, charset) for _ in range(count)]
