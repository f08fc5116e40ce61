"""Rich rendering for the human-readable (non-JSON) output mode.

Renderables are printed into a StringIO-backed Console and returned as a
string. Rich emits no colour codes when the output is not a terminal,
which keeps piped output and CliRunner captures plain.
"""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

if TYPE_CHECKING:
    from rich.console import RenderableType

    from zenkaku.services.result import ServiceResult

ZEN_THEME = Theme(
    {
        "zen.error": "bold red",
        "zen.op": "bold cyan",
        "zen.name": "bold blue",
        "zen.glyphs": "magenta",
        "zen.detail": "dim",
    }
)


def render(*renderables: RenderableType, width: int = 120) -> str:
    """Print *renderables* to an off-screen console and return the text."""
    buffer = StringIO()
    console = Console(file=buffer, theme=ZEN_THEME, highlight=False, width=width)
    for renderable in renderables:
        console.print(renderable)
    return buffer.getvalue().rstrip("\n")


def scheme_table(items: list[dict[str, Any]]) -> str:
    """One row per scheme: name, its ten glyphs, description."""
    table = Table(pad_edge=False)
    table.add_column("Name", style="zen.name", no_wrap=True)
    table.add_column("Glyphs 0-9", style="zen.glyphs", no_wrap=True)
    table.add_column("Description")
    for item in items:
        table.add_row(
            Text(item["name"]), Text(item["glyphs"]), Text(item.get("description", ""))
        )

    noun = "scheme" if len(items) == 1 else "schemes"
    return render(table, Text(f"\n{len(items)} {noun}"))


def error_report(result: ServiceResult, *, verbose: bool = False) -> str:
    """``ERROR <op>: <message>``, followed by the error detail when *verbose*."""
    assert result.error is not None
    lines: list[RenderableType] = [
        Text.assemble(
            ("ERROR", "zen.error"), " ", (result.op, "zen.op"), f": {result.error.message}"
        )
    ]
    if verbose:
        lines.extend(
            Text(f"  {key}: {value}", style="zen.detail")
            for key, value in result.error.detail.items()
        )
    return render(*lines)
