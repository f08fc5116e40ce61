"""Shared Click options: ``--examples`` and the scheme-name ``--type``."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import click

if TYPE_CHECKING:
    from zenkaku.domain.registry import SchemeRegistry

F = TypeVar("F", bound=Callable[..., Any])


def examples_option(text: str) -> Callable[[F], F]:
    """Add an eager ``--examples`` flag that prints *text* and exits."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(text)
        ctx.exit()

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )


class SchemeOption(click.Option):
    """An option naming a scheme; its help lists the registered names.

    The names come from the invocation's registry, so schemes from
    ``zenkaku.toml`` and plugins show up in ``--help`` too.
    """

    def get_help_record(self, ctx: click.Context) -> tuple[str, str] | None:
        names = ", ".join(_registry_for(ctx).list_names())
        self.help = (
            "Conversion type (default: convert.default_scheme, normally fullwidth). "
            f"Available types: {names}."
        )
        return super().get_help_record(ctx)


def _registry_for(ctx: click.Context) -> SchemeRegistry:
    from zenkaku.commands._context import AppContext

    app = ctx.find_object(AppContext)
    if app is not None:
        return app.registry

    from zenkaku.domain.registry import build_default_registry

    return build_default_registry()
