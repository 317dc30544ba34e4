#!/usr/bin/env python3

import logging
import pathlib

import click
import lazy_object_proxy
import pydantic

from password_zen import version
from password_zen._cli.commands.analyze import analyze
from password_zen._cli.commands.generate import generate
from password_zen._cli.exc import ConfigSyntaxError, ConfigValidationError
from password_zen._conf import Settings
from password_zen.exc import InputLocation
from password_zen.util.model import convert_errors, format_errors

ConfigOption = pathlib.Path | None


def validate_config(ctx: click.Context, fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            raise ConfigSyntaxError(
                str(ex),
                ctx=ConfigSyntaxError.Context(loc=InputLocation(filename=fn)),
            ) from ex

    if not isinstance(payload, dict):
        raise ConfigValidationError("  * <root>: Input should be a valid YAML mapping")

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(format_errors(convert_errors(ex))) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group(
    context_settings={"auto_envvar_prefix": "PASSWORD_ZEN"},
    epilog="Use 'password-zen COMMAND --help' for detailed command information.",
)
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML configuration file with defaults for command options.",
)
@click.version_option(
    version.short(), "-v", "--version", message=version.info()
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    """
    Password Zen generates secure passwords and analyzes password strength.

    \b
    Features:
      * Generate cryptographically secure passwords with customizable options
      * Analyze password strength against security criteria
      * Batch analysis of password files
      * Colorful output with animations (can be disabled)
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(ctx=ctx, fn=config))
    ctx.default_map = lazy_object_proxy.Proxy(lambda: ctx.obj.as_default_map())


cli.add_command(generate)
cli.add_command(analyze)

if __name__ == "__main__":
    cli()
