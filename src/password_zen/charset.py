import logging
import string
from typing import Optional

__all__ = (
    "Charset",
    "LETTERS",
    "DIGITS",
    "SYMBOLS",
    "AMBIGUOUS",
    "build",
    "resolve",
)

logger = logging.getLogger(__name__)

Charset = str

LETTERS = string.ascii_lowercase + string.ascii_uppercase
DIGITS = string.digits
SYMBOLS = "!@#$%^&*()-_=+[]{}|;:,.<>?/"

# characters that are easily confused with one another in common fonts
AMBIGUOUS = "il1LoO0"


def build(
    include_digits: bool, include_symbols: bool, exclude_ambiguous: bool
) -> Charset:
    """
    Assembles the pool of characters eligible for random selection.

    Letters are always included, so the result is never empty. When
    ``exclude_ambiguous`` is set, every occurrence of an :data:`AMBIGUOUS` character
    is filtered out while the order of the remaining characters is kept.
    """
    charset = LETTERS

    if include_digits:
        charset += DIGITS

    if include_symbols:
        charset += SYMBOLS

    if exclude_ambiguous:
        charset = "".join(ch for ch in charset if ch not in AMBIGUOUS)

    return charset


def resolve(
    custom: Optional[str],
    include_digits: bool,
    include_symbols: bool,
    exclude_ambiguous: bool,
) -> Charset:
    """Returns ``custom`` verbatim if given, otherwise builds one from the flags."""
    if custom:
        logger.debug("using custom charset of %d character(s)", len(custom))
        return custom

    charset = build(include_digits, include_symbols, exclude_ambiguous)
    logger.debug(
        "built charset of %d character(s) (digits=%s, symbols=%s, "
        "exclude_ambiguous=%s)",
        len(charset),
        include_digits,
        include_symbols,
        exclude_ambiguous,
    )
    return charset
