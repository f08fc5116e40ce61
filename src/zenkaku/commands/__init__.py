"""Subcommands of the ``zenkaku`` group."""

from __future__ import annotations

import click


def register_commands(cli: click.Group) -> None:
    from zenkaku.commands.convert import convert
    from zenkaku.commands.schemes import schemes

    cli.add_command(convert)
    cli.add_command(schemes)
