"""Command: convert digits in text, or reverse the conversion."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from zenkaku.commands._options import SchemeOption, examples_option

if TYPE_CHECKING:
    from zenkaku.commands._context import AppContext


def _read_stdin() -> list[str]:
    """All stdin lines, without their ``\\n`` or ``\\r\\n`` terminators.

    Bytes that are not UTF-8 become lone surrogates and are restored on output.
    """
    lines = []
    for raw in sys.stdin.buffer:
        if raw.endswith(b"\n"):
            raw = raw[:-1].removesuffix(b"\r")
        lines.append(raw.decode("utf-8", "surrogateescape"))
    return lines


def _json_safe(line: str) -> str:
    """Swap smuggled undecodable bytes for U+FFFD; JSON cannot carry them."""
    return line.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


@click.command()
@click.option("-t", "--type", "scheme_name", cls=SchemeOption, default=None, metavar="NAME")
@click.option(
    "-r",
    "--reverse",
    is_flag=True,
    help="Reverse conversion from Unicode digits back to ASCII.",
)
@click.argument("text", nargs=-1)
@examples_option(
    """\
  zenkaku convert "Room 204"
  zenkaku convert -t circle 0123
  zenkaku convert -t chinese -r "一二"
  echo "Call 555-0199" | zenkaku convert -t thai
  zenkaku --json convert -t roman 1984"""
)
@click.pass_obj
def convert(
    app: AppContext,
    scheme_name: str | None,
    reverse: bool,
    text: tuple[str, ...],
) -> None:
    """Convert digits in TEXT to Unicode digit forms, or back with --reverse.

    Multiple TEXT arguments are joined with single spaces into one line.
    Without TEXT, lines are read from standard input.
    """
    from zenkaku.services.convert import ConvertService

    lines = [" ".join(text)] if text else _read_stdin()
    if app.settings.json_output:
        lines = [_json_safe(line) for line in lines]

    name = scheme_name or app.settings.convert.default_scheme
    app.emit(ConvertService(app.registry).convert(lines, name, reverse=reverse))
