"""Scheme plugins discovered through the ``zenkaku.plugins`` entry point group."""

from zenkaku.plugins.hookspecs import hookimpl
from zenkaku.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
