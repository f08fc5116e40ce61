"""AppContext: the object the root group hands to every subcommand."""

from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

import click

from zenkaku.config.logging import configure_logging
from zenkaku.output.formatters import TEXT_OPS, format_result

if TYPE_CHECKING:
    from zenkaku.config.settings import ZenkakuSettings
    from zenkaku.domain.registry import SchemeRegistry
    from zenkaku.services.result import ServiceResult


class AppContext:
    """Settings for this invocation, the scheme registry, and result output.

    Reached from commands via ``@click.pass_obj``.
    """

    def __init__(self, settings: ZenkakuSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @cached_property
    def registry(self) -> SchemeRegistry:
        """Built-in schemes, then ``[[schemes]]`` from the config, then plugins.

        Built on first use, so ``--version`` never loads plugins.

        Raises:
            click.ClickException: A configured scheme is malformed or reuses
                a taken name.
        """
        from zenkaku.domain.registry import SchemeError, build_default_registry

        plugin_manager = None
        if self.settings.plugins.enabled:
            from zenkaku.plugins.manager import PluginManager

            plugin_manager = PluginManager()
            plugin_manager.discover_and_load()

        try:
            configured = [entry.to_scheme() for entry in self.settings.schemes]
            return build_default_registry(configured, plugin_manager=plugin_manager)
        except (SchemeError, ValueError) as exc:
            raise click.ClickException(f"Invalid scheme configuration: {exc}") from exc

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failure goes to stderr and exits with status 1."""
        if not result.ok:
            click.echo(self._format(result), err=True)
            raise SystemExit(1)

        # Empty input converts to nothing, not to a blank line.
        if result.op in TEXT_OPS and not result.data["lines"] and not self.settings.json_output:
            return
        # Undecodable input bytes ride through as surrogates; write them back as bytes.
        click.echo(self._format(result).encode("utf-8", "surrogateescape"))

    def _format(self, result: ServiceResult) -> str:
        return format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
