"""Shared pytest fixtures for zenkaku tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from zenkaku.domain.registry import SchemeRegistry, build_default_registry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def registry() -> SchemeRegistry:
    """Registry holding only the five built-in schemes."""
    return build_default_registry()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no ZENKAKU_* env.

    Keeps a stray ``zenkaku.toml`` in the developer's tree (or env) from
    leaking into config discovery.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ZENKAKU_CONFIG", raising=False)
    monkeypatch.delenv("ZENKAKU_CONVERT__DEFAULT_SCHEME", raising=False)
    monkeypatch.delenv("ZENKAKU_PLUGINS__ENABLED", raising=False)
