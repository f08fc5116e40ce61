"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from zenkaku.config.models import (
    ConvertConfig,
    PluginsConfig,
    SchemeConfig,
)
from zenkaku.domain.schemes import Scheme


class TestDefaults:
    def test_convert_defaults(self) -> None:
        assert ConvertConfig().default_scheme == "fullwidth"

    def test_plugins_enabled_by_default(self) -> None:
        assert PluginsConfig().enabled is True

    def test_frozen(self) -> None:
        cfg = ConvertConfig()
        with pytest.raises(ValidationError):
            cfg.default_scheme = "thai"  # type: ignore[misc]


class TestSchemeConfig:
    def test_to_scheme(self) -> None:
        cfg = SchemeConfig(
            name="superscript",
            glyphs=list("⁰¹²³⁴⁵⁶⁷⁸⁹"),
            description="Superscript digits",
        )
        scheme = cfg.to_scheme()
        assert isinstance(scheme, Scheme)
        assert scheme.encode("x2") == "x²"
        assert scheme.description == "Superscript digits"

    def test_wrong_glyph_count_rejected(self) -> None:
        with pytest.raises(ValidationError, match="expected 10 glyphs"):
            SchemeConfig(name="short", glyphs=list("abc"))

    def test_duplicate_glyphs_rejected_when_built(self) -> None:
        cfg = SchemeConfig(name="dupe", glyphs=list("aaaaaaaaaa"))
        with pytest.raises(ValueError, match="distinct"):
            cfg.to_scheme()
