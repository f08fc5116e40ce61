"""Command: list the available digit schemes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zenkaku.commands._options import examples_option

if TYPE_CHECKING:
    from zenkaku.commands._context import AppContext


@click.command()
@examples_option(
    """\
  zenkaku schemes
  zenkaku -q schemes
  zenkaku --json schemes"""
)
@click.pass_obj
def schemes(app: AppContext) -> None:
    """List available conversion types with their glyphs."""
    from zenkaku.services.convert import ConvertService

    app.emit(ConvertService(app.registry).list_schemes())
