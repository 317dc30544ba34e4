import logging
import pathlib
from datetime import datetime
from typing import NoReturn, Optional

import click
from humanize import precisedelta

from ... import analyzer, exc
from ...dto import AnalysisCriteria
from ..exc import CLIError
from ..report import ReportRenderer, create_console, render_plain
from ..source import read_passwords

__all__ = ["analyze"]


logger = logging.getLogger(__name__)


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.debug(ex, exc_info=ex)
    raise CLIError("Unexpected error: %r" % ex) from ex


def collect_passwords(
    password: Optional[str], filename: Optional[pathlib.Path]
) -> list[str]:
    if filename is not None:
        return read_passwords(filename)

    if not password:
        raise exc.InputUnavailableError(
            "No password provided for analysis. Use --password or --file to specify "
            "a password or file."
        )

    return [password]


@click.command()
@click.option("-p", "--password", help="Password to analyze.")
@click.option(
    "-f",
    "--file",
    "filename",
    type=click.Path(path_type=pathlib.Path),
    help="Text file containing passwords to analyze, one per line.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True, path_type=pathlib.Path),
    help="Output file for the analysis report.",
)
@click.option(
    "-m",
    "--min-length",
    type=click.IntRange(min=0),
    default=8,
    show_default=True,
    help="Minimum length for passwords.",
)
@click.option(
    "-s",
    "--require-symbols/--no-require-symbols",
    default=False,
    show_default=True,
    help="Require passwords to contain special characters.",
)
@click.option(
    "-d",
    "--require-digits/--no-require-digits",
    default=True,
    show_default=True,
    help="Require passwords to contain digits.",
)
@click.option(
    "-u",
    "--require-uppercase/--no-require-uppercase",
    default=True,
    show_default=True,
    help="Require passwords to contain uppercase letters.",
)
@click.option(
    "-l",
    "--require-lowercase/--no-require-lowercase",
    default=True,
    show_default=True,
    help="Require passwords to contain lowercase letters.",
)
@click.option(
    "--color/--no-color", default=True, show_default=True, help="Colored output."
)
@click.option(
    "--animation/--no-animation",
    default=True,
    show_default=True,
    help="Show a progress animation while analyzing.",
)
def analyze(
    password: Optional[str],
    filename: Optional[pathlib.Path],
    output: Optional[pathlib.Path],
    min_length: int,
    require_symbols: bool,
    require_digits: bool,
    require_uppercase: bool,
    require_lowercase: bool,
    color: bool,
    animation: bool,
) -> None:
    """
    Analyze passwords against strength criteria.

    Checks the length of each password and, depending on the options, whether it
    contains special characters, digits, uppercase and lowercase letters.

    Examples:

    \b
      # Analyze a single password
      $ password-zen analyze -p 'test@123'
    \b
      # Analyze a file of passwords and save the report
      $ password-zen analyze -f passwords.txt -o report.txt --no-animation
    \b
      # Require symbols and at least 12 characters
      $ password-zen analyze -p 'S3cure!pass' -s -m 12
    """
    if password is not None and filename is not None:
        raise click.UsageError(
            "Options --password and --file are mutually exclusive."
        )

    criteria = AnalysisCriteria(
        min_length=min_length,
        require_symbols=require_symbols,
        require_digits=require_digits,
        require_uppercase=require_uppercase,
        require_lowercase=require_lowercase,
    )
    renderer = ReportRenderer(
        console=create_console(color), color=color, animation=animation
    )

    try:
        passwords = collect_passwords(password, filename)
        if filename is not None:
            renderer.console.print(
                "Analyzing passwords from file: %s" % filename, markup=False
            )

        started_at = datetime.now()
        report = analyzer.analyze_batch(passwords, criteria)
        logger.debug(
            "analyzed %d password(s) in %s",
            report.total,
            precisedelta(
                datetime.now() - started_at,
                minimum_unit="microseconds",
                format="%0.0f",
            ),
        )
    except exc.InputUnavailableError as ex:
        raise CLIError(str(ex)) from ex
    except Exception as ex:
        raise_unexpected_exc(ex)

    for index, result in enumerate(report.results, start=1):
        renderer.announce(index)
        renderer.render_result(index, result)

    renderer.render_summary(report)

    if output is not None:
        try:
            output.write_text(render_plain(report), encoding="utf-8")
        except OSError as ex:
            raise CLIError("Error writing to output file: %s" % ex) from ex

        renderer.console.print(
            "Analysis results written to %s" % output, markup=False
        )
