"""The ``register_schemes`` hook that scheme plugins implement."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from zenkaku.domain.schemes import Scheme

PROJECT_NAME = "zenkaku"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class ZenkakuHookSpec:
    @hookspec
    def register_schemes(self) -> list[Scheme] | None:
        """Return extra schemes to add after the built-in and configured ones.

        Names already taken are skipped with a warning.
        """
