"""Plugin discovery and scheme contribution.

A plugin is any object implementing the ``register_schemes`` hook, usually
published by a pip-installed package under the ``zenkaku.plugins`` entry
point group. A misbehaving plugin never stops the CLI: the failure is
logged as a warning and that plugin's contribution is dropped.
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING

import pluggy

from zenkaku.domain.registry import DuplicateNameError
from zenkaku.domain.schemes import Scheme
from zenkaku.plugins.hookspecs import PROJECT_NAME, ZenkakuHookSpec

if TYPE_CHECKING:
    from zenkaku.domain.registry import SchemeRegistry

ENTRY_POINT_GROUP = "zenkaku.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Thin wrapper over :class:`pluggy.PluginManager` for scheme plugins."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(ZenkakuHookSpec)

    def discover_and_load(self) -> list[str]:
        """Load entry-point plugins; return the names now registered."""
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        # An entry point may name a class rather than an instance.
        for plugin in [p for p in self._pm.get_plugins() if inspect.isclass(p)]:
            self._instantiate(plugin)
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin object directly (tests, embedding)."""
        name = name or type(plugin).__name__
        self._pm.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)

    def list_plugin_names(self) -> list[str]:
        return [name for name, _plugin in self._pm.list_name_plugin()]

    def contribute_schemes(self, registry: SchemeRegistry) -> list[str]:
        """Register every plugin scheme in *registry*; return the added names.

        A scheme whose name is already taken is skipped, so built-in and
        configured schemes always win.
        """
        added: list[str] = []
        for impl in self._pm.hook.register_schemes.get_hookimpls():
            for scheme in self._collect(impl):
                try:
                    registry.register(scheme)
                except DuplicateNameError:
                    logger.warning(
                        "Plugin %s scheme %r conflicts with an existing scheme; skipped",
                        impl.plugin_name,
                        scheme.name,
                    )
                    continue
                added.append(scheme.name)
        return added

    def _collect(self, impl: pluggy.HookImpl) -> list[Scheme]:
        """Call one plugin's hook and keep only well-formed schemes."""
        try:
            returned = impl.function()
        except Exception:
            logger.warning(
                "Failed to collect schemes from plugin %s", impl.plugin_name, exc_info=True
            )
            return []
        if returned is None:
            return []
        if not isinstance(returned, (list, tuple)):
            logger.warning("Plugin %s returned non-list scheme registrations", impl.plugin_name)
            return []

        schemes: list[Scheme] = []
        for entry in returned:
            if isinstance(entry, Scheme):
                schemes.append(entry)
            else:
                logger.warning("Plugin %s returned a non-Scheme entry: %r", impl.plugin_name, entry)
        return schemes

    def _instantiate(self, plugin_cls: type) -> None:
        name = self._pm.get_name(plugin_cls) or plugin_cls.__name__
        self._pm.unregister(plugin_cls)
        try:
            instance = plugin_cls()
        except Exception:
            logger.warning("Failed to instantiate entry-point plugin %s", name, exc_info=True)
            return
        self._pm.register(instance, name=name)
