import logging
from typing import NoReturn, Optional

import click

from ... import charset, exc, generator
from ..exc import CLIError

__all__ = ["generate"]


logger = logging.getLogger(__name__)


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex) from ex


@click.command()
@click.option(
    "-l",
    "--length",
    type=int,
    default=12,
    show_default=True,
    help="Length of the generated password (1-%d)." % generator.MAX_LENGTH,
)
@click.option(
    "-d",
    "--include-digits/--no-include-digits",
    default=True,
    show_default=True,
    help="Include digits.",
)
@click.option(
    "-s",
    "--include-symbols/--no-include-symbols",
    default=False,
    show_default=True,
    help="Include special characters like %s" % charset.SYMBOLS,
)
@click.option(
    "-e",
    "--exclude-ambiguous/--no-exclude-ambiguous",
    default=False,
    show_default=True,
    help="Exclude ambiguous characters like %s" % charset.AMBIGUOUS,
)
@click.option(
    "-c",
    "--charset",
    "custom_charset",
    default=None,
    help=(
        "Custom character set to use for password generation. Overrides the "
        "--include-* and --exclude-ambiguous options."
    ),
)
@click.option(
    "-n",
    "--count",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of passwords to generate.",
)
def generate(
    length: int,
    include_digits: bool,
    include_symbols: bool,
    exclude_ambiguous: bool,
    custom_charset: Optional[str],
    count: int,
) -> None:
    """
    Generate cryptographically secure passwords.

    Examples:

    \b
      # Generate a 12 character password with letters and digits
      $ password-zen generate
    \b
      # Generate a 24 character password with symbols, skipping look-alikes
      $ password-zen generate -l 24 -s -e
    \b
      # Generate five PINs
      $ password-zen generate -l 6 -c 0123456789 -n 5
    """
    pool = charset.resolve(
        custom_charset,
        include_digits=include_digits,
        include_symbols=include_symbols,
        exclude_ambiguous=exclude_ambiguous,
    )

    try:
        passwords = generator.generate_many(count, length, pool)
    except exc.GenerationError as ex:
        raise CLIError(str(ex)) from ex
    except Exception as ex:
        raise_unexpected_exc(ex)

    for pwd in passwords:
        click.echo(pwd)
