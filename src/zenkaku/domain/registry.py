"""Scheme registry — name -> Scheme lookup.

The registry is an explicit value, built once at startup by
:func:`build_default_registry` and handed to whoever needs to resolve a
scheme name. Population happens before first lookup; nothing mutates it
afterwards.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from zenkaku.domain.schemes import BUILTIN_SCHEMES, Scheme

if TYPE_CHECKING:
    from zenkaku.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class SchemeError(Exception):
    """Base class for scheme registration and lookup failures."""


class DuplicateNameError(SchemeError):
    """Raised when two schemes are registered under the same name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Scheme {name!r} is already registered")
        self.name = name


class UnknownSchemeError(SchemeError, KeyError):
    """Raised when a scheme name is not in the registry."""

    def __init__(self, name: str, available: Iterable[str] = ()) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self) -> str:
        msg = f"Unknown scheme {self.name!r}"
        if self.available:
            msg += f". Available types: {', '.join(self.available)}"
        return msg


class SchemeRegistry:
    """Ordered collection of schemes keyed by name."""

    def __init__(self, schemes: Iterable[Scheme] = ()) -> None:
        self._schemes: dict[str, Scheme] = {}
        for scheme in schemes:
            self.register(scheme)

    def register(self, scheme: Scheme) -> None:
        """Add *scheme* under its name.

        Raises:
            DuplicateNameError: If the name is already taken.
        """
        if scheme.name in self._schemes:
            raise DuplicateNameError(scheme.name)
        self._schemes[scheme.name] = scheme
        logger.debug("Registered scheme: %s", scheme.name)

    def resolve(self, name: str) -> Scheme:
        """Return the scheme registered as *name*.

        Raises:
            UnknownSchemeError: If no such scheme exists.
        """
        try:
            return self._schemes[name]
        except KeyError:
            raise UnknownSchemeError(name, self.list_names()) from None

    def list_names(self) -> list[str]:
        """All registered names in lexicographic order."""
        return sorted(self._schemes)

    def schemes(self) -> list[Scheme]:
        """All registered schemes, in :meth:`list_names` order."""
        return [self._schemes[name] for name in self.list_names()]


def build_default_registry(
    extra: Iterable[Scheme] = (),
    *,
    plugin_manager: PluginManager | None = None,
) -> SchemeRegistry:
    """Build the process registry.

    Order: built-in schemes, then *extra* (typically from ``zenkaku.toml``),
    then schemes contributed by plugins. Collisions among built-ins and
    *extra* raise :class:`DuplicateNameError`; plugin collisions are logged
    and skipped.
    """
    registry = SchemeRegistry(BUILTIN_SCHEMES)
    for scheme in extra:
        registry.register(scheme)
    if plugin_manager is not None:
        plugin_manager.contribute_schemes(registry)
    return registry
