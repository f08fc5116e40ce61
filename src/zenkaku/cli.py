"""The ``zenkaku`` command group: global output and config flags."""

from __future__ import annotations

import click
from pydantic import ValidationError

from zenkaku import __version__
from zenkaku.commands import register_commands
from zenkaku.commands._context import AppContext
from zenkaku.commands._options import examples_option
from zenkaku.config.settings import ZenkakuSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="zenkaku")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and error details.")
@click.option("--log-json", is_flag=True, help="Write logs to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    default=None,
    metavar="PATH",
    help="Use this config file instead of searching for zenkaku.toml.",
)
@examples_option(
    """\
  zenkaku convert "Room 204"
  zenkaku convert -t circle -r "⓪①"
  zenkaku schemes"""
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """zenkaku: convert ASCII digits to Unicode digit forms and back."""
    try:
        settings = ZenkakuSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
        )
    except ValidationError as exc:
        raise click.ClickException(f"Invalid configuration: {exc}") from exc

    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
